from typing import List


class SupernodePartition:
    """
    members[i] holds the original vertices contracted into slot i.
    Taken together the lists always partition range(n); a slot is live while
    its list is nonempty and never comes back once merged away.
    """
    __slots__ = ['members', 'num_live']

    def __init__(self, n: int):
        self.members: List[List[int]] = [[v] for v in range(n)]
        self.num_live = n

    def __len__(self):
        return len(self.members)

    def __repr__(self):
        live = {i: self.members[i] for i in self.live_slots()}
        return f"SupernodePartition(live={live})"

    def is_live(self, i: int) -> bool:
        return bool(self.members[i])

    def live_slots(self) -> List[int]:
        return [i for i, group in enumerate(self.members) if group]

    def merge(self, i: int, j: int):
        """Moves every vertex owned by slot j into slot i; j becomes dead."""
        if i == j:
            raise ValueError(f"cannot merge slot {i} into itself")
        if not self.members[i] or not self.members[j]:
            raise ValueError(f"both slots must be live to merge, got ({i}, {j})")

        self.members[i].extend(self.members[j])
        self.members[j] = []
        self.num_live -= 1

    def copy(self) -> 'SupernodePartition':
        clone = SupernodePartition.__new__(SupernodePartition)
        clone.members = [list(group) for group in self.members]
        clone.num_live = self.num_live
        return clone
