"""Root conftest — sets env vars BEFORE any peertime module is imported.

DisplaySettings resolves its config dir from PEERTIME_DIR, so point it at a
throwaway directory and clear the display overrides a developer may have set.
"""

import os
import tempfile

# Force-set (not setdefault) to prevent real env vars from leaking into tests
os.environ["PEERTIME_DIR"] = tempfile.mkdtemp(prefix="peertime-test-")
for _name in (
    "PEERTIME_USE_24_HOUR",
    "PEERTIME_SHOW_TIME_INLINE",
    "PEERTIME_SHOW_OFFSET",
    "PEERTIME_LOCALE",
):
    os.environ.pop(_name, None)
