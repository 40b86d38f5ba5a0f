"""Material Design icons via QtAwesome."""
import qtawesome as qta

from question_bank.gui.styles.theme import get_colors


class MaterialIcons:
    """Centralized Material Design icon definitions using QtAwesome."""

    @staticmethod
    def star(filled: bool):
        """Favorite toggle; filled when the record is a favorite."""
        colors = get_colors()
        if filled:
            return qta.icon('mdi6.star', color=colors.FAVORITE)
        return qta.icon('mdi6.star-outline', color=colors.TEXT_SECONDARY)

    @staticmethod
    def dice():
        """Random question icon."""
        return qta.icon('mdi6.dice-5-outline', color=get_colors().TEXT_SECONDARY)

    @staticmethod
    def filter_remove():
        """Clear filters icon."""
        return qta.icon('mdi6.filter-remove-outline', color=get_colors().TEXT_SECONDARY)

    @staticmethod
    def theme(is_dark: bool):
        """Dark-mode toggle icon."""
        name = 'mdi6.weather-sunny' if is_dark else 'mdi6.weather-night'
        return qta.icon(name, color=get_colors().TEXT_SECONDARY)

    @staticmethod
    def magnify():
        """Search field icon."""
        return qta.icon('mdi6.magnify', color=get_colors().TEXT_SECONDARY)
