from PySide6.QtWidgets import (
	QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QListWidget,
	QStackedWidget, QListWidgetItem, QTableWidget, QTableWidgetItem, QSizePolicy, QLineEdit,
	QMessageBox, QButtonGroup, QApplication
)
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure
from PySide6.QtCore import Qt
from PySide6.QtGui import QColor
from BackEnd.core.clock import fmt_total, fmt_record_duration, fmt_local_datetime
from BackEnd.core.errors import ValidationError
from BackEnd.core.models import SessionStatus, TimerPhase
from FrontEnd.components.progress_ring import ProgressRing
from FrontEnd.components.stat_card import StatCard
from FrontEnd.styles.design_tokens import COLORS, stylesheet


class MainWindow(QMainWindow):
	def __init__(self, timer_service, ledger):
		super().__init__()
		self.setWindowTitle("Focus Timer")
		self.resize(1000, 650)
		self.setStyleSheet(stylesheet())

		self.timer_service = timer_service
		self.ledger = ledger

		self.sidebar = QListWidget()
		self.sidebar.setObjectName("Sidebar")
		self.sidebar.setFixedWidth(200)
		self.sidebar.setSpacing(12)
		self.sidebar.addItem(QListWidgetItem("Timer"))
		self.sidebar.addItem(QListWidgetItem("History"))
		self.sidebar.setCurrentRow(0)

		self.stack = QStackedWidget()
		self.timer_tab = self._build_timer_tab()
		self.history_tab = self._build_history_tab()
		self.stack.addWidget(self.timer_tab)
		self.stack.addWidget(self.history_tab)

		main_layout = QHBoxLayout()
		main_layout.setContentsMargins(0, 0, 0, 0)
		main_layout.setSpacing(0)
		main_layout.addWidget(self.sidebar)
		main_layout.addWidget(self.stack)
		container = QWidget()
		container.setLayout(main_layout)
		self.setCentralWidget(container)

		self.sidebar.currentRowChanged.connect(self.stack.setCurrentIndex)

		self.timer_service.tick.connect(self._on_tick)
		self.timer_service.state_changed.connect(self._on_state)
		self.timer_service.preset_changed.connect(self._on_preset_changed)
		self.timer_service.alarm.connect(QApplication.beep)
		self.timer_service.session_finished.connect(self._on_session_finished)
		self.ledger.changed.connect(self._refresh_history)

		self._on_tick(self.timer_service.time_left)
		self._set_buttons(self.timer_service.phase.value)
		self._refresh_history()

	def closeEvent(self, event):
		# Leaving mid-session: stop the tick so nothing fires after the window is gone.
		# Unfinished sessions are not recorded.
		if self.timer_service.phase != TimerPhase.IDLE:
			self.timer_service.reset()
		super().closeEvent(event)

	def _build_timer_tab(self):
		w = QWidget()
		outer = QVBoxLayout()
		outer.setContentsMargins(32, 32, 32, 32)
		outer.setSpacing(16)
		outer.setAlignment(Qt.AlignmentFlag.AlignCenter)

		# Preset row
		preset_row = QHBoxLayout()
		preset_row.setSpacing(12)
		preset_row.addStretch()
		self.preset_group = QButtonGroup(self)
		self.preset_group.setExclusive(True)
		for minutes in self.timer_service.config.presets:
			btn = QPushButton(f"{minutes} min")
			btn.setObjectName("PresetBtn")
			btn.setCheckable(True)
			btn.setChecked(minutes == self.timer_service.preset)
			self.preset_group.addButton(btn, minutes)
			preset_row.addWidget(btn)
		preset_row.addStretch()
		outer.addLayout(preset_row)
		self.preset_group.idClicked.connect(self._select_preset)

		self.session_input = QLineEdit()
		self.session_input.setPlaceholderText("What are you focusing on?")
		self.session_input.setMaximumWidth(360)
		outer.addWidget(self.session_input, alignment=Qt.AlignmentFlag.AlignHCenter)

		self.ring = ProgressRing()
		outer.addWidget(self.ring, alignment=Qt.AlignmentFlag.AlignHCenter)

		btn_layout = QHBoxLayout()
		btn_layout.setSpacing(24)
		btn_layout.addStretch()
		self.start_btn = QPushButton("Start")
		self.start_btn.setObjectName("StartBtn")
		self.pause_btn = QPushButton("Pause")
		self.stop_btn = QPushButton("Stop")
		self.reset_btn = QPushButton("Reset")
		for btn in (self.start_btn, self.pause_btn, self.stop_btn, self.reset_btn):
			btn.setMinimumHeight(48)
			btn_layout.addWidget(btn)
		btn_layout.addStretch()
		outer.addLayout(btn_layout)

		w.setLayout(outer)

		self.start_btn.clicked.connect(self._start)
		self.pause_btn.clicked.connect(self.timer_service.pause)
		self.stop_btn.clicked.connect(self._stop)
		self.reset_btn.clicked.connect(self._reset)
		return w

	def _build_history_tab(self):
		w = QWidget()
		layout = QVBoxLayout()
		layout.setAlignment(Qt.AlignmentFlag.AlignTop)
		layout.setContentsMargins(32, 32, 32, 32)

		stats_row = QHBoxLayout()
		stats_row.setSpacing(24)
		self.total_sessions_card = StatCard("Total Sessions")
		self.total_time_card = StatCard("Total Focus Time", "0h 0m")
		self.today_card = StatCard("Sessions Today")
		for card in (self.total_sessions_card, self.total_time_card, self.today_card):
			stats_row.addWidget(card)
		layout.addLayout(stats_row)

		# Bar chart (matplotlib)
		self.figure = Figure(figsize=(5, 2.2))
		self.canvas = FigureCanvas(self.figure)
		layout.addWidget(self.canvas)

		self.history_table = QTableWidget()
		self.history_table.setColumnCount(5)
		self.history_table.setHorizontalHeaderLabels(["Session", "Date", "Status", "Duration", ""])
		self.history_table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
		self.history_table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
		self.history_table.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
		layout.addWidget(self.history_table)

		self.empty_label = QLabel("No sessions yet. Start focusing!")
		self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		layout.addWidget(self.empty_label)

		w.setLayout(layout)
		return w

	def _select_preset(self, minutes):
		if self.timer_service.phase != TimerPhase.IDLE:
			return
		self.timer_service.select_preset(minutes)

	def _start(self):
		try:
			self.timer_service.start(self.session_input.text())
		except ValidationError as e:
			self._mark_input_error(True)
			QMessageBox.warning(self, "Focus Timer", str(e))
			self.session_input.setFocus()
			return
		self._mark_input_error(False)

	def _stop(self):
		self.timer_service.request_stop()
		box = QMessageBox(self)
		box.setWindowTitle("End Session")
		box.setText("How did this session go?")
		completed = box.addButton("Completed", QMessageBox.AcceptRole)
		incomplete = box.addButton("Incomplete", QMessageBox.DestructiveRole)
		box.addButton("Cancel", QMessageBox.RejectRole)
		box.exec()
		clicked = box.clickedButton()
		if clicked is completed:
			self.timer_service.resolve_disposition(SessionStatus.COMPLETED)
		elif clicked is incomplete:
			self.timer_service.resolve_disposition(SessionStatus.INCOMPLETE)
		else:
			# stays paused; user can resume or reset
			self.timer_service.cancel_disposition()

	def _reset(self):
		self.timer_service.reset()
		self._mark_input_error(False)

	def _mark_input_error(self, on):
		self.session_input.setProperty("error", "true" if on else "false")
		self.session_input.style().unpolish(self.session_input)
		self.session_input.style().polish(self.session_input)

	def _on_tick(self, time_left):
		self.ring.set_progress(self.timer_service.percent, self.timer_service.display_text())

	def _on_preset_changed(self, minutes):
		btn = self.preset_group.button(minutes)
		if btn is not None:
			btn.setChecked(True)

	def _on_state(self, state):
		self._set_buttons(state)

	def _on_session_finished(self, record):
		self.session_input.clear()
		self._mark_input_error(False)
		if record.status == SessionStatus.COMPLETED and record.actual_duration == record.planned_duration * 60:
			QMessageBox.information(self, "Focus Timer", "Session Completed! Great job!")

	def _set_buttons(self, state):
		idle = state == TimerPhase.IDLE.value
		running = state == TimerPhase.RUNNING.value
		self.start_btn.setVisible(not running)
		self.start_btn.setEnabled(idle or state == TimerPhase.PAUSED.value)
		self.start_btn.setText("Resume" if state == TimerPhase.PAUSED.value else "Start")
		self.pause_btn.setVisible(running)
		self.stop_btn.setVisible(running or state == TimerPhase.PAUSED.value)
		self.session_input.setEnabled(idle)
		for btn in self.preset_group.buttons():
			btn.setEnabled(idle)

	def _refresh_history(self):
		stats = self.ledger.aggregate()
		self.total_sessions_card.set_value(str(stats.total_sessions))
		self.total_time_card.set_value(fmt_total(stats.total_time_seconds))
		self.today_card.set_value(str(stats.today_count))

		records = self.ledger.records()
		self.empty_label.setVisible(not records)
		self.history_table.setRowCount(len(records))
		for row, rec in enumerate(records):
			self.history_table.setItem(row, 0, QTableWidgetItem(rec.name))
			self.history_table.setItem(row, 1, QTableWidgetItem(fmt_local_datetime(rec.timestamp)))
			status_item = QTableWidgetItem(rec.status.value)
			color = COLORS['status_completed'] if rec.status == SessionStatus.COMPLETED else COLORS['status_incomplete']
			status_item.setForeground(QColor(color))
			self.history_table.setItem(row, 2, status_item)
			self.history_table.setItem(row, 3, QTableWidgetItem(fmt_record_duration(rec.actual_duration)))
			delete_btn = QPushButton("Delete")
			delete_btn.clicked.connect(lambda _=False, sid=rec.id: self._delete_session(sid))
			self.history_table.setCellWidget(row, 4, delete_btn)
		self._update_bar_chart()

	def _delete_session(self, session_id):
		answer = QMessageBox.question(self, "Delete Session", "Are you sure you want to delete this session?")
		if answer == QMessageBox.StandardButton.Yes:
			self.ledger.delete(session_id)

	def _update_bar_chart(self):
		totals = self.ledger.daily_totals(7)
		x = [d.strftime("%a") for d, _ in totals]
		y = [seconds / 60 for _, seconds in totals]

		self.figure.clear()
		self.figure.patch.set_alpha(0.0)
		ax = self.figure.add_subplot(111)
		ax.set_facecolor('#F7FAFC')
		bars = ax.bar(x, y, color=COLORS['chart_bar'], edgecolor=COLORS['chart_edge'], linewidth=1.5, alpha=0.9)
		for bar, value in zip(bars, y):
			if value > 0:
				ax.text(bar.get_x() + bar.get_width()/2, bar.get_height(),
				       f'{value:.0f}m', ha='center', va='bottom', fontsize=9, color=COLORS['text_strong'])
		ax.set_ylabel("Minutes", fontsize=11, color=COLORS['text_strong'])
		ax.set_title("Focus Time, Last 7 Days", fontsize=12, fontweight='bold', color=COLORS['text_strong'])
		ax.set_ylim(bottom=0)
		ax.grid(True, axis='y', alpha=0.25, linestyle='--', linewidth=0.8)
		ax.set_axisbelow(True)
		for spine in ['top', 'right']:
			ax.spines[spine].set_visible(False)
		self.figure.tight_layout()
		self.canvas.draw()
