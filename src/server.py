import setproctitle
import asyncio
import threading
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import FileResponse, HTMLResponse, StreamingResponse
import uvicorn
from pathlib import Path

from folio import generator

PORT = 8765
BASE_DIR = Path(__file__).parent.parent
SITE_ROOT = BASE_DIR / "site"
WATCH_DIR = SITE_ROOT / "local"
OUTPUT_DIR = WATCH_DIR / "web"
PUBLIC_DIR = SITE_ROOT / "public"


# global state for hot reload
reload_event = asyncio.Event()
last_change_time = 0.0
DEBOUNCE_SECONDS = 0.5


# ##################################################################
# file watcher
# watches the site config and content for changes and triggers reload events
class FileWatcher:
    def __init__(self, watch_path: Path, ignore: Path | None = None, debounce: float = DEBOUNCE_SECONDS):
        self.watch_path = watch_path
        self.ignore = ignore
        self.debounce = debounce
        self.last_trigger = 0.0
        self.running = False
        self.file_times: dict[str, float] = {}
        self._init_file_times()

    def _files(self):
        if not self.watch_path.exists():
            return
        for f in self.watch_path.rglob("*"):
            if not f.is_file():
                continue
            if self.ignore is not None and f.is_relative_to(self.ignore):
                continue
            yield f

    def _init_file_times(self):
        for f in self._files():
            self.file_times[str(f)] = f.stat().st_mtime

    def check_changes(self) -> bool:
        changed = False
        current_files = set()

        for f in self._files():
            path_str = str(f)
            current_files.add(path_str)
            mtime = f.stat().st_mtime

            if self.file_times.get(path_str) != mtime:
                self.file_times[path_str] = mtime
                changed = True

        # check for deleted files
        deleted = set(self.file_times.keys()) - current_files
        if deleted:
            for d in deleted:
                del self.file_times[d]
            changed = True

        return changed

    def run(self, loop: asyncio.AbstractEventLoop):
        global last_change_time
        self.running = True
        while self.running:
            if self.check_changes():
                now = time.time()
                if now - self.last_trigger > self.debounce:
                    self.last_trigger = now
                    last_change_time = now
                    print(f"Change detected in {self.watch_path}, reloading")
                    loop.call_soon_threadsafe(reload_event.set)
            time.sleep(0.2)

    def stop(self):
        self.running = False


file_watcher: FileWatcher | None = None
watcher_thread: threading.Thread | None = None


# ##################################################################
# start file watcher
# initializes the file watcher in a background thread
def start_file_watcher():
    global file_watcher, watcher_thread
    loop = asyncio.get_running_loop()
    file_watcher = FileWatcher(WATCH_DIR, ignore=OUTPUT_DIR)
    watcher_thread = threading.Thread(target=file_watcher.run, args=(loop,), daemon=True)
    watcher_thread.start()


# ##################################################################
# lifespan
# creates the theme context for the session and runs the content watcher
@asynccontextmanager
async def lifespan(app: FastAPI):
    _, _, app.state.theme = generator.load_site(SITE_ROOT)
    start_file_watcher()
    yield
    if file_watcher:
        file_watcher.stop()


app = FastAPI(title="Portfolio", lifespan=lifespan)


# ##################################################################
# root endpoint
# renders the portfolio page from the current content on every request
@app.get("/", response_class=HTMLResponse)
async def root(request: Request):
    config, portfolio, _ = generator.load_site(SITE_ROOT)
    return generator.generate_index(portfolio, request.app.state.theme, config, hot_reload=True)


# ##################################################################
# health endpoint
# returns simple status for health checks and test fixtures
@app.get("/health")
async def health():
    return {"status": "ok"}


# ##################################################################
# hot reload sse endpoint
# streams server-sent events when the site content changes
@app.get("/hot-reload")
async def hot_reload():
    async def event_stream():
        client_time = time.time()

        while True:
            try:
                await asyncio.wait_for(reload_event.wait(), timeout=30.0)
                reload_event.clear()

                if last_change_time > client_time:
                    client_time = last_change_time
                    yield "data: reload\n\n"
            except asyncio.TimeoutError:
                # send keepalive
                yield ": keepalive\n\n"

    return StreamingResponse(
        event_stream(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no"
        }
    )


# ##################################################################
# public file endpoint (must be last to avoid capturing other routes)
# serves files such as the resume pdf from site/public, 404 page otherwise
@app.get("/{filename}")
async def public_file(filename: str):
    safe_name = Path(filename).name
    file_path = PUBLIC_DIR / safe_name

    if safe_name != filename or not file_path.is_file():
        raise HTTPException(status_code=404, detail="Not found")

    return FileResponse(file_path)


# ##################################################################
# not found handler
# renders the generated error page for any 404
@app.exception_handler(404)
async def not_found(_request: Request, _exc: HTTPException):
    return HTMLResponse(generator.generate_error(), status_code=404)


# ##################################################################
# main
# starts the uvicorn server with configured host and port
def main():
    setproctitle.setproctitle("portfolio-server")
    uvicorn.run(app, host="127.0.0.1", port=PORT)


# ##################################################################
# entry point
# standard python dispatch for main
if __name__ == "__main__":
    main()
