from .notifier import LoggerNotifier
from .prompts import RichConflictPrompter, RichDestinationPicker

__all__ = ["LoggerNotifier", "RichConflictPrompter", "RichDestinationPicker"]
