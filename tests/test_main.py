import pytest

import main
from models.relation import PairwiseRelation, RelationConsistencyError


def test_process_instance_writes_solution(params, write_instance, tmp_path, capsys):
    write_instance(1, "2\n0 0\n10 10\n")

    result = main.process_instance(1, params)

    assert result.as_pairs() == [("v", 5.0)]
    assert (tmp_path / "output_greedy" / "greedy_solution01.txt").read_text() == "1\nv 5.0\n"
    assert "[OK] instance01.txt" in capsys.readouterr().out


def test_process_instance_saves_image_when_enabled(params, write_instance, tmp_path):
    params["SAVE_IMAGES"] = True
    params["RENDER_SIZE"] = 64
    write_instance(2, "3\n0 0\n5 0\n10 0\n")

    main.process_instance(2, params)

    assert (tmp_path / "output_greedy" / "greedy_solution02.png").is_file()


@pytest.mark.parametrize("body, message", [
    (None, "[SKIP] No instance05.txt found."),
    ("", "[WARN] There are no points in instance05.txt"),
    ("3\n0 0\n1 1\n", "[WARN] instance05.txt has incorrect number of points"),
    ("2\n1 1\n1 1\n", "[WARN] instance05.txt cannot be separated"),
])
def test_process_instance_skips_bad_instances(params, write_instance, tmp_path, capsys, body, message):
    if body is not None:
        write_instance(5, body)

    assert main.process_instance(5, params) is None
    assert message in capsys.readouterr().out
    assert not (tmp_path / "output_greedy" / "greedy_solution05.txt").exists()


def test_consistency_violation_stops_processing(params, write_instance, monkeypatch):
    write_instance(1, "2\n0 0\n10 10\n")

    def broken(self):
        raise RelationConsistencyError("corrupted")

    monkeypatch.setattr(PairwiseRelation, "verify_complete", broken)
    with pytest.raises(RelationConsistencyError):
        main.run_batch(params)


def test_run_batch_counts_processed_instances(params, write_instance):
    params["FIRST_INSTANCE_INDEX"] = 1
    params["MAX_INSTANCE_INDEX"] = 6
    write_instance(1, "2\n0 0\n10 10\n")
    write_instance(2, "2\n0 0\n")
    write_instance(4, "4\n0 0\n1 10\n2 1\n3 11\n")

    assert main.run_batch(params) == 2


def test_build_params_applies_overrides():
    args = main.parse_args(["--input", "in", "--output", "out", "--first", "3",
                            "--last", "7", "--no-images", "--no-verify"])
    params = main.build_params(args)

    assert params["INPUT_FOLDER"] == "in"
    assert params["OUTPUT_FOLDER"] == "out"
    assert params["FIRST_INSTANCE_INDEX"] == 3
    assert params["MAX_INSTANCE_INDEX"] == 8
    assert params["SAVE_IMAGES"] is False
    assert params["VERIFY_SOLUTIONS"] is False


def test_main_reports_file_count(params, write_instance, capsys):
    write_instance(1, "2\n0 0\n10 10\n")
    write_instance(3, "3\n0 0\n5 0\n10 0\n")

    exit_status = main.main([
        "--input", params["INPUT_FOLDER"],
        "--output", params["OUTPUT_FOLDER"],
        "--first", "1", "--last", "4",
        "--no-images",
    ])

    out = capsys.readouterr().out
    assert not exit_status
    assert "2 files done." in out
    assert out.startswith("----------- Program starts -----------")


def test_unreadable_instance_does_not_stop_batch(params, write_instance, capsys):
    params["FIRST_INSTANCE_INDEX"] = 1
    params["MAX_INSTANCE_INDEX"] = 3
    write_instance(1, "2\n0 0\n10 10\n")
    path = write_instance(2, "")
    path.write_bytes(b"\xff\xfe\x00garbage")

    assert main.run_batch(params) == 1
    assert "[WARN] There are no points in instance02.txt" in capsys.readouterr().out


def test_unverified_solution_is_not_written(params, write_instance, tmp_path, monkeypatch, capsys):
    write_instance(1, "2\n0 0\n10 10\n")
    monkeypatch.setattr(main, "unseparated_pairs", lambda lines, points: [(points[0], points[1])])

    assert main.process_instance(1, params) is None
    assert "[ERROR] instance01.txt: 1 pairs left unseparated" in capsys.readouterr().out
    assert not (tmp_path / "output_greedy" / "greedy_solution01.txt").exists()
