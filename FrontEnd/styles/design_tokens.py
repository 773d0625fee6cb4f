# Design tokens for Focus Timer UI

COLORS = {
	'background': '#F7F9FC',
	'surface': '#E7F0FF',
	'primary': '#5EA1FF',
	'primary_hover': '#4C92F5',
	'text': '#3C4450',
	'text_strong': '#133A62',
	'border': '#DCE3ED',
	'ring_track': '#DCE3ED',
	'ring_progress': '#5EA1FF',
	'sidebar_bg': '#F7F9FC',
	'sidebar_active_bg': '#E7F0FF',
	'button_secondary_bg': '#E7F0FF',
	'danger': '#E5675E',
	'status_completed': '#3FA36B',
	'status_incomplete': '#E5A13B',
	'input_error': '#E5675E',
	'chart_bar': '#8FAEC4',
	'chart_edge': '#7B9BB0',
}

FONTS = {
	'family': 'Inter, Manrope, Arial, sans-serif',
	'timer_size': 64,
	'button_size': 16,
	'stat_size': 28,
	'text': 14,
}


def stylesheet():
	"""Application-wide QSS built from the tokens above."""
	return f"""
	QMainWindow, QWidget {{
		background: {COLORS['background']};
		color: {COLORS['text']};
		font-family: {FONTS['family']};
		font-size: {FONTS['text']}px;
	}}
	QListWidget#Sidebar {{
		background: {COLORS['sidebar_bg']};
		border-right: 1px solid {COLORS['border']};
	}}
	QListWidget#Sidebar::item:selected {{
		background: {COLORS['sidebar_active_bg']};
		color: {COLORS['text_strong']};
	}}
	QPushButton {{
		background: {COLORS['button_secondary_bg']};
		border: 1px solid {COLORS['border']};
		border-radius: 12px;
		padding: 8px 20px;
		font-size: {FONTS['button_size']}px;
	}}
	QPushButton#StartBtn {{
		background: {COLORS['primary']};
		color: white;
	}}
	QPushButton#StartBtn:hover {{
		background: {COLORS['primary_hover']};
	}}
	QPushButton#PresetBtn:checked {{
		background: {COLORS['primary']};
		color: white;
	}}
	QLineEdit {{
		border: 1px solid {COLORS['border']};
		border-radius: 8px;
		padding: 6px 10px;
		background: white;
	}}
	QLineEdit[error="true"] {{
		border: 2px solid {COLORS['input_error']};
	}}
	QLabel#StatValue {{
		font-size: {FONTS['stat_size']}px;
		font-weight: 600;
		color: {COLORS['text_strong']};
	}}
	"""
