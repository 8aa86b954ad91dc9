import heapq
import itertools


class Frontier:
    """
    Min-ordered open set of cells keyed by F.

    Each entry captures the cell's F at push time; ties go to the cell pushed
    first. There is no decrease-key: if a cell's cost is lowered while it is
    queued, its entry keeps the old key and is not re-sorted.
    """

    def __init__(self):
        self._heap = []
        self._counter = itertools.count()

    def push(self, cell):
        heapq.heappush(self._heap, (cell.f, next(self._counter), cell))

    def pop(self):
        """Remove and return the cell with the lowest key. Raises IndexError when empty."""
        _, _, cell = heapq.heappop(self._heap)
        return cell

    def points(self):
        """Points of the queued cells, in heap storage order."""
        return [cell.point for _, _, cell in self._heap]

    def __len__(self):
        return len(self._heap)

    def __bool__(self):
        return bool(self._heap)
