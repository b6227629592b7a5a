import os
import re
import pytest
import subprocess
import time
import socket
from contextlib import closing
import sys
from pathlib import Path
from playwright.sync_api import sync_playwright


PROJECT_ROOT = Path(__file__).parent.parent


# ##################################################################
# find free port
# binds to port 0 to let the os assign an available port
def find_free_port():
    with closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind(("", 0))
        s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        return s.getsockname()[1]


# ##################################################################
# server port fixture
# provides a free port for the test server session
@pytest.fixture(scope="session")
def server_port():
    return find_free_port()


# ##################################################################
# server fixture
# starts fastapi server as subprocess and yields url when ready
@pytest.fixture(scope="session")
def server(server_port):
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in [str(PROJECT_ROOT / "site" / "src"), env.get("PYTHONPATH")] if p
    )

    proc = subprocess.Popen(
        [
            sys.executable, "-m", "uvicorn",
            "src.server:app",
            "--host", "127.0.0.1",
            "--port", str(server_port),
        ],
        cwd=PROJECT_ROOT,
        env=env,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )

    server_url = f"http://127.0.0.1:{server_port}"
    max_attempts = 30
    for _ in range(max_attempts):
        try:
            import httpx
            response = httpx.get(f"{server_url}/health", timeout=1.0)
            if response.status_code == 200:
                break
        except httpx.HTTPError:
            pass
        time.sleep(0.5)
    else:
        proc.terminate()
        raise RuntimeError(f"Server failed to start on port {server_port}")

    yield server_url

    proc.terminate()
    try:
        proc.wait(timeout=3)
    except subprocess.TimeoutExpired:
        proc.kill()
        proc.wait(timeout=2)


# ##################################################################
# shared browser fixture
# single chromium instance reused across all tests
@pytest.fixture(scope="session")
def shared_browser():
    pw = sync_playwright().start()
    try:
        browser = pw.chromium.launch(headless=True)
    except Exception:
        pw.stop()
        raise
    yield browser
    browser.close()
    pw.stop()


# ##################################################################
# portfolio page fixture
# fresh page per test so theme and reveal state start clean
@pytest.fixture
def portfolio_page(server, shared_browser):
    page = shared_browser.new_page(viewport={"width": 1280, "height": 800})
    # cdn assets are optional for the page, keep tests offline
    page.route(re.compile(r"^https?://(?!127\.0\.0\.1)"), lambda route: route.abort())
    page.goto(f"{server}/", wait_until="domcontentloaded")
    yield page
    page.close()
