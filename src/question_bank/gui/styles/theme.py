"""Light and dark palettes for the browser window."""


class Colors:
    BACKGROUND = "#F5F7FA"
    SURFACE = "#FFFFFF"
    BORDER = "#D0D7DE"
    TEXT_PRIMARY = "#1F2328"
    TEXT_SECONDARY = "#656D76"
    PRIMARY = "#0969DA"
    FAVORITE = "#D4A72C"
    ERROR = "#CF222E"
    EASY = "#2DA44E"
    MEDIUM = "#BF8700"
    HARD = "#CF222E"


class ColorsDark:
    BACKGROUND = "#0D1117"
    SURFACE = "#161B22"
    BORDER = "#30363D"
    TEXT_PRIMARY = "#E6EDF3"
    TEXT_SECONDARY = "#8D96A0"
    PRIMARY = "#4493F8"
    FAVORITE = "#E3B341"
    ERROR = "#F85149"
    EASY = "#3FB950"
    MEDIUM = "#D29922"
    HARD = "#F85149"


_IS_DARK = False


def set_dark_mode(is_dark: bool) -> None:
    global _IS_DARK
    _IS_DARK = is_dark


def get_colors():
    return ColorsDark if _IS_DARK else Colors


def difficulty_color(difficulty: str) -> str:
    colors = get_colors()
    return getattr(colors, str(difficulty).upper(), colors.TEXT_SECONDARY)


def build_stylesheet(is_dark: bool) -> str:
    c = ColorsDark if is_dark else Colors
    return f"""
        QWidget {{ background-color: {c.BACKGROUND}; color: {c.TEXT_PRIMARY}; }}
        QFrame#questionCard {{
            background-color: {c.SURFACE};
            border: 1px solid {c.BORDER};
            border-radius: 8px;
        }}
        QFrame#questionCard QLabel {{ background-color: transparent; }}
        QLabel#cardMeta {{ color: {c.TEXT_SECONDARY}; }}
        QLabel#errorState {{ color: {c.ERROR}; }}
        QLineEdit, QComboBox {{
            background-color: {c.SURFACE};
            border: 1px solid {c.BORDER};
            border-radius: 4px;
            padding: 4px;
        }}
        QPushButton:checked {{ color: {c.PRIMARY}; font-weight: bold; }}
    """


def apply_theme(app, is_dark: bool) -> None:
    """Set the module palette and the application stylesheet together."""
    set_dark_mode(is_dark)
    app.setStyleSheet(build_stylesheet(is_dark))
