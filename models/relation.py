import numpy as np


class RelationConsistencyError(RuntimeError):
    """
    The complete relation does not hold N*(N-1) connected ordered pairs.
    Signals corrupted state; callers are not expected to recover from it.
    """


class PairwiseRelation:
    """
    Symmetric "still connected" matrix over point ids.

    Supports:
      - complete initialization with a pair-count consistency check
      - single-pair and block disconnection (both directions at once)
      - counting connected pairs between two id groups
      - the live count of connected ordered pairs, `remaining()`

    The diagonal is kept False and never consulted. Once a pair is
    disconnected it stays disconnected, so `remaining()` only decreases.
    """

    def __init__(self, num_points: int):
        self.num_points = num_points
        self.matrix = np.zeros((num_points, num_points), dtype=bool)
        self.num_edges = 0
        self.initialize()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def initialize(self):
        """
        Connects every pair (i, j), i != j, and verifies the count.
        """
        n = self.num_points
        self.matrix = ~np.eye(n, dtype=bool)
        self.num_edges = int(np.count_nonzero(self.matrix))
        self.verify_complete()

    def verify_complete(self):
        """
        Raises RelationConsistencyError unless all N*(N-1) ordered pairs are
        connected.
        """
        n = self.num_points
        expected = n * (n - 1)
        actual = int(np.count_nonzero(self.matrix))
        if actual != expected or self.num_edges != expected:
            raise RelationConsistencyError(
                f"The number of points is incorrect: expected {expected} links "
                f"for {n} points, found {actual} (counter {self.num_edges})"
            )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_connected(self, i: int, j: int) -> bool:
        return bool(self.matrix[i, j])

    def remaining(self) -> int:
        """Number of connected ordered pairs left."""
        return self.num_edges

    def count_connected(self, left_ids, right_ids) -> int:
        """
        Number of connected pairs (p, q) with p in `left_ids` and q in
        `right_ids`. Each unordered pair counts once.
        """
        if len(left_ids) == 0 or len(right_ids) == 0:
            return 0
        return int(np.count_nonzero(self.matrix[np.ix_(left_ids, right_ids)]))

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------

    def disconnect(self, i: int, j: int) -> bool:
        """
        Clears (i, j) and (j, i). Returns False if they were already
        disconnected.
        """
        if not self.matrix[i, j]:
            return False
        self.matrix[i, j] = False
        self.matrix[j, i] = False
        self.num_edges -= 2
        return True

    def disconnect_groups(self, left_ids, right_ids) -> int:
        """
        Disconnects every pair across the two groups and returns how many
        connected pairs were broken.
        """
        broken = self.count_connected(left_ids, right_ids)
        if broken:
            self.matrix[np.ix_(left_ids, right_ids)] = False
            self.matrix[np.ix_(right_ids, left_ids)] = False
            self.num_edges -= 2 * broken
        return broken

    def __repr__(self):
        return f"PairwiseRelation(n={self.num_points}, remaining={self.num_edges})"
