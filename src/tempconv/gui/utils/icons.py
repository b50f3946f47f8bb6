"""Material Design icons via QtAwesome."""
import qtawesome as qta
from tempconv.gui.styles.theme import get_colors

class MaterialIcons:
    """Centralized Material Design icon definitions using QtAwesome."""

    # Form actions
    @staticmethod
    def thermometer(color=None):
        """Convert action icon."""
        return qta.icon('mdi6.thermometer', color=color or get_colors().TEXT_ON_PRIMARY)

    @staticmethod
    def swap(color=None):
        """Flip direction icon."""
        return qta.icon('mdi6.swap-horizontal', color=color or get_colors().TEXT_SECONDARY)

    # Console menu
    @staticmethod
    def delete():
        """Clear/delete icon."""
        return qta.icon('mdi6.delete-outline', color=get_colors().ERROR)

    @staticmethod
    def content_copy():
        """Copy icon."""
        return qta.icon('mdi6.content-copy', color=get_colors().TEXT_SECONDARY)

    @staticmethod
    def content_save():
        """Save icon."""
        return qta.icon('mdi6.content-save-outline', color=get_colors().TEXT_SECONDARY)
