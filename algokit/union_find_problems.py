"""Disjoint-set exercises: checking for a tree and merging accounts."""

from collections.abc import Iterable, Sequence

from algokit.union_find import UnionFind


def valid_tree(n: int, edges: Iterable[Sequence[int]]) -> bool:
    """Whether the undirected ``edges`` on vertices ``0 .. n - 1`` form one tree."""
    forest = UnionFind(n)
    components = n
    for a, b in edges:
        if not forest.union(a, b):
            return False
        components -= 1
    return components == 1


def accounts_merge(accounts: Sequence[Sequence[str]]) -> list[list[str]]:
    """Merge accounts that share an e-mail address.

    Each account is ``[name, email, ...]``. Each merged account is the name
    of its group's representative followed by its e-mails in sorted order.
    """
    parent = list(range(len(accounts)))
    size = [1] * len(accounts)

    def find(x: int) -> int:
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def unite(x: int, y: int) -> None:
        root_x, root_y = find(x), find(y)
        if root_x == root_y:
            return
        if size[root_x] < size[root_y]:
            root_x, root_y = root_y, root_x
        size[root_x] += size[root_y]
        parent[root_y] = root_x

    owner: dict[str, int] = {}
    for index, (_, *emails) in enumerate(accounts):
        for email in emails:
            if email in owner:
                unite(index, owner[email])
            else:
                owner[email] = index

    groups: dict[int, list[str]] = {}
    for email in sorted(owner):
        groups.setdefault(find(owner[email]), []).append(email)

    return [[accounts[root][0], *groups[root]] for root in sorted(groups)]