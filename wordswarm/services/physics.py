"""Per-frame token physics."""

import math
from typing import Final

from wordswarm.models.collapse import Collapse
from wordswarm.models.connections import ConnectionGraph
from wordswarm.models.region import Region
from wordswarm.models.token import Token

#: Tokens further apart than this do not interact.
INTERACTION_RANGE: Final[float] = 150.0
#: Neighbouring letters closer than this are linked.
CONNECTION_RANGE: Final[float] = 100.0
#: Pull between neighbouring letters of a sequence.
ATTRACTION: Final[float] = 0.05
#: Tokens closer than this push each other apart.
REPULSION_RANGE: Final[float] = 40.0
#: Repulsion per unit of overlap.
REPULSION: Final[float] = 0.01
#: Top speed of a token moving to its slot in a word.
SEEK_MAX_SPEED: Final[float] = 3.0
#: Fraction of the distance to its slot a token covers per frame.
SEEK_GAIN: Final[float] = 0.1
#: A token this close to its slot has arrived.
SEEK_ARRIVAL: Final[float] = 1.0
#: Velocity kept per frame once a token has arrived.
SEEK_SETTLE: Final[float] = 0.8
#: Velocity kept per frame.
DAMPING: Final[float] = 0.95
#: Velocity kept, reversed, on hitting the canvas edge.
WALL_BOUNCE: Final[float] = -0.5
#: Velocity kept, reversed, on hitting the exclusion region.
REGION_BOUNCE: Final[float] = -0.7
#: Outward kick away from the exclusion region.
REGION_PUSH: Final[float] = 0.5
#: Amplitude of the size pulse of word tokens.
PULSE_AMPLITUDE: Final[float] = 0.1
#: Pulse phase advance per second.
PULSE_RATE: Final[float] = 2.0


class PhysicsEngine:
    """
    Advances token positions and velocities one frame at a time.

    Velocities are in units per frame.  ``dt`` only drives the size pulse and
    token ages.

    Args:
        connections: Graph that neighbouring letters are linked in

    """

    def __init__(self, connections: ConnectionGraph | None = None) -> None:
        #: Links between neighbouring letters.
        self.connections = connections if connections is not None else ConnectionGraph()

    def update(
        self,
        tokens: list[Token],
        bounds: tuple[float, float],
        region: Region | None = None,
        dt: float = 0.0,
    ) -> None:
        """
        Advance every token one frame, in place.

        For each token, in order:

        - seek its slot if it has one;
        - otherwise feel the pull of neighbouring letters and the push of any
          token that is too close;
        - integrate and damp;
        - pulse if it is part of a word;
        - bounce out of the exclusion region;
        - bounce off the canvas edges.

        Edges are resolved last so that every token ends the frame on the
        canvas.

        Args:
            tokens: The live tokens
            bounds: Canvas ``(width, height)``

        Keyword Args:
            region: Area tokens must stay out of, if any
            dt: Seconds since the previous frame

        """
        width, height = bounds
        for token in tokens:
            token.lifespan += dt
            token.pulse_phase += dt * PULSE_RATE
            if token.has_target:
                self.seek_target(token)
            else:
                self.apply_pair_forces(token, tokens)
            token.x += token.vx
            token.y += token.vy
            token.vx *= DAMPING
            token.vy *= DAMPING
            if token.is_part_of_word:
                token.size = token.base_size * (
                    1 + math.sin(token.pulse_phase) * PULSE_AMPLITUDE
                )
            if region is not None:
                self.resolve_exclusion(token, region)
            self.contain(token, width, height)

    def seek_target(self, token: Token) -> None:
        """
        Steer a token towards its slot, or let it settle once there.

        Args:
            token: A token with a target

        """
        if token.target is None:
            return
        target_x, target_y = token.target
        dx = target_x - token.x
        dy = target_y - token.y
        dist = math.hypot(dx, dy)
        if dist > SEEK_ARRIVAL:
            speed = min(dist * SEEK_GAIN, SEEK_MAX_SPEED)
            token.vx = dx / dist * speed
            token.vy = dy / dist * speed
        else:
            token.vx *= SEEK_SETTLE
            token.vy *= SEEK_SETTLE
            token.settle()

    def apply_pair_forces(self, token: Token, tokens: list[Token]) -> None:
        """
        Apply the pull of neighbouring letters and the push of crowding tokens
        to ``token``'s velocity.

        Args:
            token: The token being moved
            tokens: Every live token

        """
        for other in tokens:
            if other is token:
                continue
            dx = token.x - other.x
            dy = token.y - other.y
            dist = math.hypot(dx, dy)
            # Coincident tokens have no direction
            if dist == 0 or not math.isfinite(dist) or dist > INTERACTION_RANGE:
                continue
            if (
                token.sequence_id == other.sequence_id
                and abs(token.letter_index - other.letter_index) == 1
            ):
                token.vx -= dx / dist * ATTRACTION
                token.vy -= dy / dist * ATTRACTION
                if dist < CONNECTION_RANGE:
                    self.connections.connect(token, other)
            if dist < REPULSION_RANGE:
                force = (REPULSION_RANGE - dist) * REPULSION
                token.vx += dx / dist * force
                token.vy += dy / dist * force

    def resolve_exclusion(self, token: Token, region: Region) -> None:
        """
        Push a token out of the exclusion region through the nearest edge.

        The edge is picked by comparing the token's offset from the region
        centre normalised by the half width and half height.  The matching
        velocity component is reversed and damped and a small kick away from
        the centre keeps the token from sticking.

        Args:
            token: The token to resolve
            region: The exclusion region

        """
        if region.is_empty:
            return
        radius = token.size / 2
        if not region.overlaps_circle(token.x, token.y, radius):
            return
        center_x, center_y = region.center
        dx = token.x - center_x
        dy = token.y - center_y
        normalized_x = dx / (region.width / 2)
        normalized_y = dy / (region.height / 2)
        if abs(normalized_x) < abs(normalized_y):
            token.y = region.top - radius if dy < 0 else region.bottom + radius
            token.vy *= REGION_BOUNCE
        else:
            token.x = region.left - radius if dx < 0 else region.right + radius
            token.vx *= REGION_BOUNCE
        angle = math.atan2(dy, dx)
        token.vx += math.cos(angle) * REGION_PUSH
        token.vy += math.sin(angle) * REGION_PUSH

    def contain(self, token: Token, width: float, height: float) -> None:
        """
        Clamp a token to ``[size/2, dimension - size/2]`` on both axes,
        reversing and damping the velocity component of any clamped axis.

        Args:
            token: The token to clamp
            width: Canvas width
            height: Canvas height

        """
        half = token.size / 2
        low_x, high_x = half, max(half, width - half)
        low_y, high_y = half, max(half, height - half)
        if token.x < low_x:
            token.x = low_x
            token.vx *= WALL_BOUNCE
        elif token.x > high_x:
            token.x = high_x
            token.vx *= WALL_BOUNCE
        if token.y < low_y:
            token.y = low_y
            token.vy *= WALL_BOUNCE
        elif token.y > high_y:
            token.y = high_y
            token.vy *= WALL_BOUNCE

    def advance_collapse(self, collapse: Collapse, tokens: list[Token]) -> None:
        """
        Step a removal collapse one frame and pull its tokens in.

        While growing, the pull builds up slowly.  While shrinking, the pull is
        strong, tokens shrink as they near the centre and any token within 5
        units of it is marked ``to_be_removed``.

        Args:
            collapse: The collapse to advance
            tokens: The live tokens it is swallowing

        """
        collapse.advance()
        for token in tokens:
            dx = collapse.x - token.x
            dy = collapse.y - token.y
            dist = math.hypot(dx, dy)
            if collapse.growing:
                if dist == 0:
                    continue
                force = 0.05 * collapse.frame / Collapse.GROW_FRAMES
            else:
                if dist < 5:  # noqa: PLR2004
                    token.to_be_removed = True
                if dist == 0:
                    continue
                force = 0.5 + collapse.progress * 2.0
                token.size = token.base_size * min(1.0, dist / 100)
            token.vx += dx / dist * force
            token.vy += dy / dist * force

    def push_away(
        self,
        tokens: list[Token],
        x: float,
        y: float,
        radius: float = 100.0,
        force: float = 0.5,
    ) -> None:
        """
        Push tokens near a point away from it, harder the closer they are.

        Args:
            tokens: The live tokens
            x: Horizontal position of the point
            y: Vertical position of the point

        Keyword Args:
            radius: Tokens further than this are left alone
            force: Push at zero distance

        """
        for token in tokens:
            dx = token.x - x
            dy = token.y - y
            dist = math.hypot(dx, dy)
            if dist == 0 or dist >= radius:
                continue
            push = (radius - dist) / radius * force
            token.vx += dx / dist * push
            token.vy += dy / dist * push
