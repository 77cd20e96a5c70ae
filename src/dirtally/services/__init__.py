from .tracker import WorkingDirectoryTracker
from .accumulator import SizeAccumulator, SizeIndex
from .replay_service import ReplayService
from .query_service import QueryService
from .report_service import ReportService


__all__ = [
    'WorkingDirectoryTracker',
    'SizeAccumulator',
    'SizeIndex',
    'ReplayService',
    'QueryService',
    'ReportService',
]
