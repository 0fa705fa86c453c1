import sys
import time
from pathlib import Path


def ts_str(t: float) -> str:
    return time.strftime("%H:%M:%S", time.localtime(t))


class DebugLogger:
    """Diagnostics sink: warnings to stderr, optional debug log file."""

    def __init__(self, path: "str | Path | None" = None, stream=None):
        self.enabled = False
        self.path = Path(path).expanduser() if path else None
        self._stream = stream
        self._fh = None

    @property
    def stream(self):
        # Resolved lazily so pytest's capsys sees the replaced stderr
        return self._stream if self._stream is not None else sys.stderr

    def start(self):
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._fh = open(self.path, "a", encoding="utf-8")
        self.enabled = True
        sep = f"\n{'='*60}\n  Session started: {time.strftime('%Y-%m-%d %H:%M:%S')}\n{'='*60}\n"
        self._fh.write(sep)
        self._fh.flush()

    def stop(self):
        self.enabled = False
        if self._fh:
            try:
                self._fh.close()
            except OSError:
                pass
        self._fh = None

    def log(self, text: str):
        if not self.enabled or not self._fh:
            return
        for line in text.split("\n"):
            self._fh.write(f"{ts_str(time.time())} | {line}\n")
        self._fh.flush()

    def warn(self, text: str):
        print(f"recent-cd: {text}", file=self.stream)
        self.log(f"WARN {text}")
