from .progress_broadcaster import ProgressBroadcaster
