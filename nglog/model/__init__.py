from .event import NgEvent, FIELD_SEP
from .log import NgLog, LINE_SEP

__all__ = ["NgEvent", "NgLog", "FIELD_SEP", "LINE_SEP"]
