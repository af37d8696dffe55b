"""The live state shared by the composer, the recognizer and the physics."""

from wordswarm.models.collapse import Collapse
from wordswarm.models.connections import ConnectionGraph
from wordswarm.models.sequence import Sequence
from wordswarm.models.token import Token


class Board:
    """
    Owner of every live token, the sequences they belong to, the peer links
    between them, the running removal collapses and the log of recognized
    words.

    The lists are only ever mutated in place so that collaborators holding a
    reference (the word matcher holds :attr:`recognized_words`) stay in sync
    across :meth:`clear`.
    """

    def __init__(self) -> None:
        #: Live tokens, in creation order.
        self.tokens: list[Token] = []
        #: Sequences by ID.
        self.sequences: dict[int, Sequence] = {}
        #: Words accepted this session, in order.
        self.recognized_words: list[str] = []
        #: Peer links between tokens.
        self.connections = ConnectionGraph()
        #: Running removal collapses.
        self.collapses: list[Collapse] = []

    def new_sequence(self, sequence_id: int) -> Sequence:
        """
        Register an empty sequence.

        Args:
            sequence_id: ID of the new sequence

        Returns:
            The new :class:`Sequence`

        """
        sequence = Sequence(id=sequence_id)
        self.sequences[sequence_id] = sequence
        return sequence

    def add_token(self, token: Token) -> None:
        """
        Add a token to the live set and to the end of its sequence.

        Args:
            token: The token to add

        """
        self.tokens.append(token)
        sequence = self.sequences.get(token.sequence_id)
        if sequence is None:
            sequence = self.new_sequence(token.sequence_id)
        sequence.append(token)

    def tokens_for(self, sequence_id: int) -> list[Token]:
        """
        Get the live tokens of a sequence, ordered by ``letter_index``.

        Args:
            sequence_id: ID of the sequence

        Returns:
            List of tokens, empty if none are alive

        """
        tokens = [token for token in self.tokens if token.sequence_id == sequence_id]
        tokens.sort(key=lambda token: token.letter_index)
        return tokens

    def tokens_by_uid(self, uids: frozenset[int]) -> list[Token]:
        return [token for token in self.tokens if token.uid in uids]

    def remove(self, tokens: list[Token]) -> list[tuple[int, int]]:
        """
        Delete tokens from the live set, their sequences and the connection
        graph.

        Args:
            tokens: Tokens to delete

        Returns:
            The keys of the tokens that were actually live

        """
        doomed = {token for token in tokens if token in self.tokens}
        if not doomed:
            return []
        self.tokens[:] = [token for token in self.tokens if token not in doomed]
        for sequence_id in {token.sequence_id for token in doomed}:
            sequence = self.sequences.get(sequence_id)
            if sequence is not None:
                sequence.discard(doomed)
        self.connections.discard(doomed)
        return [token.key for token in tokens if token in doomed]

    def clear(self) -> None:
        """Forget everything."""
        self.tokens.clear()
        self.sequences.clear()
        self.recognized_words.clear()
        self.connections.clear()
        self.collapses.clear()
