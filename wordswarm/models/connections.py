"""Peer links between tokens."""

from collections.abc import Iterator

from wordswarm.models.token import Token


class ConnectionGraph:
    """
    Undirected adjacency between tokens, keyed by :attr:`Token.uid`.

    Links are descriptive only (they are drawn as lines); they never keep a
    token alive.
    """

    def __init__(self) -> None:
        #: The set of linked uid pairs.
        self._edges: set[frozenset[int]] = set()

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        for edge in self._edges:
            a, b = sorted(edge)
            yield (a, b)

    def connect(self, a: Token, b: Token) -> None:
        """
        Link two distinct tokens.  Linking a token to itself is ignored.

        Args:
            a: One token
            b: The other token

        """
        if a.uid != b.uid:
            self._edges.add(frozenset((a.uid, b.uid)))

    def are_connected(self, a: Token, b: Token) -> bool:
        return frozenset((a.uid, b.uid)) in self._edges

    def neighbors(self, token: Token) -> set[int]:
        """
        Get the uids of every token linked to ``token``.

        Args:
            token: The token to look up

        Returns:
            Set of uids

        """
        result: set[int] = set()
        for edge in self._edges:
            if token.uid in edge:
                result.update(edge - {token.uid})
        return result

    def discard(self, tokens: set[Token]) -> None:
        """
        Drop every link touching any of ``tokens``.

        Args:
            tokens: Tokens that left the live set

        """
        uids = {token.uid for token in tokens}
        self._edges = {edge for edge in self._edges if not edge & uids}

    def clear(self) -> None:
        self._edges.clear()
