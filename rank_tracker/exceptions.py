"""
Error taxonomy for the rank tracker.

Only UserNotFoundError, NoCommitsError and NoValidDataError abort a tracking
run. Everything else is recovered where it happens and shows up as missing
data in the result.
"""


class TrackerError(Exception):
    """Base class for all tracker errors"""
    pass


class ValidationError(TrackerError):
    """Invalid tracking request"""
    pass


class UserNotFoundError(TrackerError):
    """Raised when the user is not present in any country's followers ranking"""

    def __init__(self, username: str):
        super().__init__(f"User @{username} not found in any country data")
        self.username = username


class NoCommitsError(TrackerError):
    """Raised when the dataset history yields no commits to analyze"""

    def __init__(self, days: int):
        super().__init__(f"No commits found in the last {days} days")
        self.days = days


class NoValidDataError(TrackerError):
    """Raised when no analyzed commit contains ranking data for the user"""

    def __init__(self, username: str | None = None):
        msg = "No valid ranking data found in any commits"
        if username:
            msg += f" for @{username}"
        super().__init__(msg)
        self.username = username


class GitCommandError(TrackerError):
    """A git invocation exited with a non-zero status"""

    def __init__(self, args: list[str], returncode: int, stderr: str = ""):
        detail = stderr.strip()[:500]
        super().__init__(
            f"git {' '.join(args)} exited {returncode}" + (f": {detail}" if detail else "")
        )
        self.args_list = list(args)
        self.returncode = returncode
        self.stderr = stderr


class ConcurrentWalkError(TrackerError):
    """Raised when a second walk is started on a checkout that is already being walked"""
    pass
