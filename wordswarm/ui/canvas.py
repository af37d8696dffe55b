"""The drawing surface the letters live on."""

import string
from typing import Final

from PySide6.QtCore import QElapsedTimer, QPointF, QRect, Qt, QTimer
from PySide6.QtGui import (
    QColor,
    QFont,
    QKeyEvent,
    QMouseEvent,
    QPainter,
    QPaintEvent,
    QPen,
    QRadialGradient,
    QResizeEvent,
)
from PySide6.QtWidgets import QFrame, QLabel, QToolButton, QVBoxLayout, QWidget

from wordswarm.composer import Composer
from wordswarm.models.region import Region
from wordswarm.models.token import Token

#: Keystroke that stands in for a space.
SPACE_PLACEHOLDER: Final[str] = "_"

INSTRUCTIONS: Final[str] = (
    "Type letters to make them appear.\n"
    "Pause for a moment to check your word.\n"
    "Real words, and letters that can be rearranged into one, join up.\n"
    "Anything else is swallowed.\n"
    "Drag to push letters around.  Esc clears."
)


def sequence_color(sequence_id: int, saturation: int = 230, value: int = 240) -> QColor:
    """
    Get the colour of a sequence: its hue steps 40 degrees per sequence.

    Args:
        sequence_id: The sequence

    Keyword Args:
        saturation: HSV saturation, 0 to 255
        value: HSV value, 0 to 255

    Returns:
        The colour

    """
    return QColor.fromHsv((sequence_id * 40) % 360, saturation, value)


def glyph_rect(token: Token) -> QRect:
    """
    Get the box a token's letter is drawn centred in.

    The box extends one full font size from the token's centre on every side.

    Args:
        token: The token

    Returns:
        The box in canvas coordinates

    """
    extent = token.size
    return QRect(
        int(token.x - extent), int(token.y - extent), int(extent * 2), int(extent * 2)
    )


class InstructionsPanel(QFrame):
    """
    Collapsible help panel drawn over the canvas.  Letters bounce off it.
    """

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("instructions")
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self.setStyleSheet(
            "#instructions { background: rgba(20, 20, 30, 200); border-radius: 8px; }"
            "QLabel, QToolButton { color: white; }"
        )
        layout = QVBoxLayout(self)
        #: Collapse/expand button.
        self.toggle_button = QToolButton(self)
        self.toggle_button.setText("−")
        self.toggle_button.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.toggle_button.clicked.connect(self.toggle)
        layout.addWidget(self.toggle_button, alignment=Qt.AlignmentFlag.AlignRight)
        #: The instructions text.
        self.label = QLabel(INSTRUCTIONS, self)
        layout.addWidget(self.label)
        self.adjustSize()

    @property
    def collapsed(self) -> bool:
        return self.label.isHidden()

    def toggle(self) -> None:
        """Collapse the panel to its button, or expand it again."""
        self.label.setVisible(self.collapsed)
        self.toggle_button.setText("+" if self.collapsed else "−")
        self.adjustSize()

    def region(self) -> Region | None:
        """
        Get the panel's area in its parent's coordinates.

        Returns:
            The region, or ``None`` while the panel is hidden

        """
        if self.isHidden():
            return None
        geometry = self.geometry()
        return Region.from_xywh(
            geometry.x(), geometry.y(), geometry.width(), geometry.height()
        )


class ComposerCanvas(QWidget):
    """
    Widget that feeds keystrokes and pointer drags to a :class:`Composer`,
    drives its frames and paints its tokens.

    This handles:

    - Letter keys, space (as ``_``) and Escape (reset)
    - Pointer drags, which push letters away
    - A frame timer that calls :meth:`Composer.tick` with the measured
      elapsed time

    Args:
        composer: The composer to drive

    """

    #: Frame interval in milliseconds.
    FRAME_MS: Final[int] = 16
    #: Margin between the instructions panel and the canvas edge.
    PANEL_MARGIN: Final[int] = 20
    #: Most recognized words listed.
    WORD_LIST_LENGTH: Final[int] = 10

    def __init__(self, composer: Composer, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setMinimumSize(320, 240)
        #: The composer being driven.
        self.composer = composer
        #: Help panel; also the exclusion region.
        self.instructions = InstructionsPanel(self)
        self.composer.region_provider = self.instructions.region
        #: Frame timer.
        self.frame_timer = QTimer(self)
        self.frame_timer.timeout.connect(self.advance_frame)
        #: Time since the previous frame.
        self._elapsed = QElapsedTimer()
        #: Whether the pointer is being dragged.
        self._dragging = False

    def start(self) -> None:
        """Start the frame timer."""
        self._elapsed.start()
        self.frame_timer.start(self.FRAME_MS)

    def stop(self) -> None:
        self.frame_timer.stop()

    def advance_frame(self, dt: float | None = None) -> None:
        """
        Tick the composer and repaint.

        Keyword Args:
            dt: Seconds since the previous frame; measured if ``None``

        """
        if dt is None:
            dt = self._elapsed.restart() / 1000 if self._elapsed.isValid() else 0.0
        self.composer.tick(dt)
        self.update()

    def resizeEvent(self, event: QResizeEvent) -> None:  # noqa: N802
        super().resizeEvent(event)
        self.composer.resize(self.width(), self.height())
        self.instructions.move(
            self.width() - self.instructions.width() - self.PANEL_MARGIN,
            self.PANEL_MARGIN,
        )

    def keyPressEvent(self, event: QKeyEvent) -> None:  # noqa: N802
        """
        Turn keystrokes into letters.

        Args:
            event: Key event

        """
        text = event.text()
        if event.key() == Qt.Key.Key_Escape:
            self.composer.reset()
            self.update()
            event.accept()
        elif event.key() == Qt.Key.Key_Space:
            self.composer.add_letter(SPACE_PLACEHOLDER)
            event.accept()
        elif len(text) == 1 and text in string.ascii_letters:
            self.composer.add_letter(text)
            event.accept()
        else:
            super().keyPressEvent(event)

    def mousePressEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        self._dragging = True
        self.setFocus()
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        if self._dragging:
            position = event.position()
            self.composer.push_away(position.x(), position.y())
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        self._dragging = False
        super().mouseReleaseEvent(event)

    def leaveEvent(self, event) -> None:  # noqa: N802
        self._dragging = False
        super().leaveEvent(event)

    def paintEvent(self, event: QPaintEvent) -> None:  # noqa: N802
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.rect(), QColor(12, 12, 20))
        self._paint_collapses(painter)
        self._paint_connections(painter)
        self._paint_tokens(painter)
        self._paint_word_list(painter)
        painter.end()

    def _paint_collapses(self, painter: QPainter) -> None:
        for collapse in self.composer.board.collapses:
            if collapse.radius <= 0:
                continue
            alpha = int(collapse.alpha * 255)
            gradient = QRadialGradient(QPointF(collapse.x, collapse.y), collapse.radius)
            gradient.setColorAt(0, QColor(0, 0, 0, alpha))
            gradient.setColorAt(0.7, QColor(40, 0, 60, int(alpha * 0.8)))
            gradient.setColorAt(1, QColor(60, 0, 100, 0))
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(gradient)
            painter.drawEllipse(QPointF(collapse.x, collapse.y), collapse.radius, collapse.radius)

    def _paint_connections(self, painter: QPainter) -> None:
        by_uid = {token.uid: token for token in self.composer.tokens}
        for a_uid, b_uid in self.composer.board.connections:
            a = by_uid.get(a_uid)
            b = by_uid.get(b_uid)
            if a is None or b is None:
                continue
            color = sequence_color(a.sequence_id)
            color.setAlphaF(0.6 if a.is_part_of_word else 0.4)
            painter.setPen(QPen(color, 3 if a.is_part_of_word else 1))
            painter.drawLine(QPointF(a.x, a.y), QPointF(b.x, b.y))

    def _paint_tokens(self, painter: QPainter) -> None:
        font = QFont("Helvetica Neue")
        font.setBold(True)
        for token in self.composer.tokens:
            pixel_size = int(token.size)
            if pixel_size <= 0:
                continue
            font.setPixelSize(pixel_size)
            painter.setFont(font)
            if token.is_part_of_word:
                painter.setPen(sequence_color(token.sequence_id, value=255))
            elif token.invalid:
                painter.setPen(QColor(150, 90, 200))
            else:
                painter.setPen(sequence_color(token.sequence_id, saturation=200))
            painter.drawText(
                glyph_rect(token),
                Qt.AlignmentFlag.AlignCenter,
                token.letter,
            )

    def _paint_word_list(self, painter: QPainter) -> None:
        words = self.composer.recent_words(self.WORD_LIST_LENGTH)
        if not words:
            return
        font = QFont()
        font.setPixelSize(16)
        painter.setFont(font)
        painter.setPen(QColor(255, 255, 255, 180))
        painter.drawText(20, 36, "Words found:")
        for row, word in enumerate(words):
            painter.drawText(20, 61 + row * 25, word)
