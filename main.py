import argparse

from models.point_set import PointSet
from separators.greedy_selector import SeparationError, separate_points
from utils.geometry import unseparated_pairs
from utils.instance_io import (
    InstanceNotFoundError,
    NoPointsError,
    PointCountError,
    instance_name,
    read_instance,
)
from visualization.save_outputs import save_all_outputs

from config import get_active_params


def process_instance(index: int, params=None):
    """
    Runs the complete pipeline for one instance:
      1. Read the points file
      2. Build the point set and its orderings
      3. Greedy separation (candidates, relation, commit loop)
      4. Optional verification of every pair
      5. Save the solution (and its rendering)

    Returns the SeparationResult, or None if the instance was skipped.
    A RelationConsistencyError is not handled here and stops the batch.
    """
    params = params or get_active_params()
    name = instance_name(index, params)

    # ------------------------------
    # STEP 1 — READ INSTANCE
    # ------------------------------
    try:
        coords = read_instance(index, params)
    except InstanceNotFoundError:
        print(f"[SKIP] No {name} found.")
        return None
    except NoPointsError as exc:
        print(f"[WARN] There are no points in {name}: {exc}")
        return None
    except PointCountError as exc:
        print(f"[WARN] {name} has incorrect number of points: {exc}")
        return None

    # ------------------------------
    # STEP 2 — POINT SET
    # ------------------------------
    point_set = PointSet.from_coordinates(coords)

    # ------------------------------
    # STEP 3 — GREEDY SEPARATION
    # ------------------------------
    try:
        result = separate_points(point_set)
    except SeparationError as exc:
        print(f"[WARN] {name} cannot be separated: {exc}. Skipping.")
        return None

    # ------------------------------
    # STEP 4 — VERIFY
    # ------------------------------
    if params.get("VERIFY_SOLUTIONS"):
        missing = unseparated_pairs(result.lines, point_set.points)
        if missing:
            print(f"[ERROR] {name}: {len(missing)} pairs left unseparated, e.g. {missing[0]}. Skipping.")
            return None

    # ------------------------------
    # STEP 5 — SAVE OUTPUTS
    # ------------------------------
    save_all_outputs(
        output_dir=params["OUTPUT_FOLDER"],
        index=index,
        point_set=point_set,
        lines=result.lines,
        params=params,
    )

    print(f"[OK] {name}: {len(point_set)} points separated by {len(result)} lines")
    return result


def run_batch(params=None) -> int:
    """
    Processes every instance index in the configured range independently.
    Returns the number of instances processed.
    """
    params = params or get_active_params()

    num_done = 0
    for index in range(params["FIRST_INSTANCE_INDEX"], params["MAX_INSTANCE_INDEX"]):
        if process_instance(index, params) is not None:
            num_done += 1

    return num_done


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Greedy separation of 2D point sets with axis-parallel lines."
    )
    parser.add_argument("--input", help="folder holding the instance files")
    parser.add_argument("--output", help="folder receiving the solutions")
    parser.add_argument("--first", type=int, help="first instance index")
    parser.add_argument("--last", type=int, help="last instance index (inclusive)")
    parser.add_argument("--no-images", action="store_true", help="only write text solutions")
    parser.add_argument("--no-verify", action="store_true", help="skip the pairwise solution check")
    return parser.parse_args(argv)


def build_params(args):
    """
    Active parameters with the command-line overrides applied.
    """
    params = get_active_params()

    if args.input:
        params["INPUT_FOLDER"] = args.input
    if args.output:
        params["OUTPUT_FOLDER"] = args.output
    if args.first is not None:
        params["FIRST_INSTANCE_INDEX"] = args.first
    if args.last is not None:
        params["MAX_INSTANCE_INDEX"] = args.last + 1
    if args.no_images:
        params["SAVE_IMAGES"] = False
    if args.no_verify:
        params["VERIFY_SOLUTIONS"] = False

    return params


def main(argv=None):
    """
    Main entry point:
      - Iterates over the instance indices
      - Processes each one independently
      - Reports how many were done
    """
    params = build_params(parse_args(argv))

    print("----------- Program starts -----------")
    num_done = run_batch(params)
    print(f"{num_done} files done.")
    print("No more input files.")
    print("----------- Program ends -----------")


if __name__ == "__main__":
    main()
