from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from models.axis_line import AxisLine
from models.point_set import PointSet
from models.relation import PairwiseRelation
from separators.candidate_generator import generate_candidates
from separators.line_scorer import links_to_break, split_ids


class SeparationError(RuntimeError):
    """
    Pairs are still connected but no live candidate can split any of them.
    Happens only when two points share both coordinates.
    """


@dataclass
class SeparationResult:
    """
    The committed lines of one instance, in commitment order.

    `scores[i]` is the number of pairs `lines[i]` disconnected when it was
    committed. `remaining_history` holds the connected ordered-pair count at
    the start and after every commit.
    """

    lines: List[AxisLine] = field(default_factory=list)
    scores: List[int] = field(default_factory=list)
    remaining_history: List[int] = field(default_factory=list)

    def as_pairs(self) -> List[Tuple[str, float]]:
        return [ln.as_pair() for ln in self.lines]

    def __len__(self):
        return len(self.lines)


class GreedySelector:
    """
    Repeatedly commits the candidate that breaks the most connected pairs
    until no pair is left connected.

    States:
        scoring     - remaining() > 0, `step()` commits one more line
        terminated  - remaining() == 0, final

    Ties go to the earliest generated candidate: candidates are scanned in
    generation order and only a strictly greater score replaces the best.
    """

    def __init__(
        self,
        point_set: PointSet,
        candidates: Optional[List[AxisLine]] = None,
        relation: Optional[PairwiseRelation] = None,
    ):
        self.point_set = point_set
        self.relation = relation if relation is not None else PairwiseRelation(len(point_set))
        self.candidates = candidates if candidates is not None else generate_candidates(point_set)

        self.result = SeparationResult(remaining_history=[self.relation.remaining()])

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def terminated(self) -> bool:
        return self.relation.remaining() == 0

    def live_candidates(self) -> List[AxisLine]:
        return [ln for ln in self.candidates if ln.live]

    # ------------------------------------------------------------------
    # One greedy step
    # ------------------------------------------------------------------

    def best_candidate(self) -> Tuple[Optional[AxisLine], int]:
        """
        Returns (line, score) of the first live candidate with the highest
        score, or (None, 0) if no candidate is live.
        """
        best_line = None
        best_score = -1

        for ln in self.candidates:
            if not ln.live:
                continue
            score = links_to_break(ln, self.point_set, self.relation)
            if score > best_score:
                best_line = ln
                best_score = score

        if best_line is None:
            return None, 0
        return best_line, best_score

    def commit(self, line: AxisLine) -> int:
        """
        Moves the line to the result set and disconnects every pair it
        splits. Returns the number of pairs broken.
        """
        line.commit()

        broken = 0
        sides = split_ids(line, self.point_set)
        if sides is not None:
            broken = self.relation.disconnect_groups(*sides)

        self.result.lines.append(line)
        self.result.scores.append(broken)
        self.result.remaining_history.append(self.relation.remaining())
        return broken

    def step(self) -> AxisLine:
        """
        Scores every live candidate and commits the best one.
        """
        line, score = self.best_candidate()
        if line is None or score == 0:
            raise SeparationError(
                f"{self.relation.remaining() // 2} pairs remain connected but no "
                f"candidate separates them (duplicate points?)"
            )
        self.commit(line)
        return line

    def run(self) -> SeparationResult:
        while not self.terminated:
            self.step()
        return self.result


def separate_points(point_set: PointSet) -> SeparationResult:
    """
    Runs the greedy separation on a fresh relation and candidate pool.
    """
    return GreedySelector(point_set).run()
