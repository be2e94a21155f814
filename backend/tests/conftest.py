"""
Shared fixtures: a fake yt-dlp executable and a TestClient wired to it.

The fake tool is a small Python script behaving like yt-dlp for the two
command lines the service builds. Its behaviour is steered with FAKE_YTDLP_*
environment variables, which the child inherits.
"""
import sys

import pytest
from fastapi.testclient import TestClient

from yt2mp3.config import Settings, get_settings
from yt2mp3.main import app

FAKE_TOOL_SOURCE = '''#!{python}
import json
import os
import sys
import time

args = sys.argv[1:]

log = os.environ.get("FAKE_YTDLP_LOG")
if log:
    with open(log, "a") as f:
        f.write(json.dumps(args) + "\\n")

pidfile = os.environ.get("FAKE_YTDLP_PIDFILE")
if pidfile:
    with open(pidfile + ".tmp", "w") as f:
        f.write(str(os.getpid()))
    os.replace(pidfile + ".tmp", pidfile)

if os.environ.get("FAKE_YTDLP_PARTIAL") and "-o" in args:
    with open(args[args.index("-o") + 1] + ".part", "wb") as f:
        f.write(b"partial download")

time.sleep(float(os.environ.get("FAKE_YTDLP_SLEEP", "0")))

code = int(os.environ.get("FAKE_YTDLP_EXIT", "0"))
if code:
    sys.stderr.write(os.environ.get("FAKE_YTDLP_STDERR", "ERROR: fake failure"))
    sys.exit(code)

url = next(a for a in args if a.startswith("http"))

if "-j" in args:
    stdout = os.environ.get("FAKE_YTDLP_STDOUT")
    if stdout is None:
        stdout = json.dumps({{"id": url.rsplit("=", 1)[-1], "title": "Fake Video", "webpage_url": url}})
    sys.stdout.write(stdout + "\\n")
    sys.exit(0)

output = args[args.index("-o") + 1]
with open(output, "wb") as f:
    f.write(b"ID3" + url.encode())
print("[ExtractAudio] Destination: " + output)
'''


@pytest.fixture
def fake_tool(tmp_path):
    path = tmp_path / "fake-yt-dlp"
    path.write_text(FAKE_TOOL_SOURCE.format(python=sys.executable))
    path.chmod(0o755)
    return path


@pytest.fixture
def scratch_dir(tmp_path):
    path = tmp_path / "scratch"
    path.mkdir()
    return path


@pytest.fixture
def tool_log(tmp_path, monkeypatch):
    """File the fake tool appends its argv to, one JSON list per call."""
    path = tmp_path / "calls.jsonl"
    monkeypatch.setenv("FAKE_YTDLP_LOG", str(path))
    return path


@pytest.fixture
def settings(fake_tool, scratch_dir):
    return Settings(
        tool_path=str(fake_tool),
        scratch_dir=str(scratch_dir),
        process_timeout=10.0,
        disconnect_poll_interval=0.05,
    )


@pytest.fixture
def client(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
