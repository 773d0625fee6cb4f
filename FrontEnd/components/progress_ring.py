from PySide6.QtWidgets import QWidget
from PySide6.QtCore import Qt, QRectF
from PySide6.QtGui import QPainter, QPen, QColor, QFont
from FrontEnd.styles.design_tokens import COLORS, FONTS


class ProgressRing(QWidget):
	"""Circular countdown: the arc shows the percentage of time left."""

	def __init__(self, diameter=280, thickness=12):
		super().__init__()
		self._percent = 100.0
		self._text = ""
		self._thickness = thickness
		self.setFixedSize(diameter, diameter)

	def set_progress(self, percent, text):
		self._percent = max(0.0, min(100.0, percent))
		self._text = text
		self.update()

	def paintEvent(self, event):
		painter = QPainter(self)
		painter.setRenderHint(QPainter.Antialiasing)
		inset = self._thickness / 2 + 2
		rect = QRectF(inset, inset, self.width() - 2 * inset, self.height() - 2 * inset)

		pen = QPen(QColor(COLORS['ring_track']))
		pen.setWidth(self._thickness)
		painter.setPen(pen)
		painter.drawEllipse(rect)

		pen.setColor(QColor(COLORS['ring_progress']))
		pen.setCapStyle(Qt.RoundCap)
		painter.setPen(pen)
		# Qt angles are in 1/16th degree, counter-clockwise from 3 o'clock
		span = int(-360 * 16 * self._percent / 100)
		painter.drawArc(rect, 90 * 16, span)

		font = QFont()
		font.setPointSize(FONTS['timer_size'] // 2)
		font.setBold(True)
		painter.setFont(font)
		painter.setPen(QColor(COLORS['text_strong']))
		painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, self._text)
		painter.end()
