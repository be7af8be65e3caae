import logging

from fastapi import FastAPI, Request, HTTPException, BackgroundTasks
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from letterboxed.settings import settings

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("letterboxed")

# Populated at startup
_trie = None


class SolveRequest(BaseModel):
    letters: str


def _parse_box_or_400(letters: str):
    from letterboxed.box import BoxLayoutError, parse_box
    try:
        return parse_box(letters)
    except BoxLayoutError as e:
        raise HTTPException(400, str(e))


def create_app(trie=None) -> FastAPI:
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        global _trie

        if trie is not None:
            _trie = trie
        else:
            from letterboxed.trie import load_trie
            logger.info("Loading dictionary from %s", settings.DICTIONARY_PATH)
            _trie = load_trie(str(settings.DICTIONARY_PATH))
        logger.info("Trie loaded")

        yield

    application = FastAPI(title="Letter Boxed Helper", lifespan=lifespan)

    @application.get("/health")
    async def health():
        return {
            "status": "ok",
            "trie_loaded": _trie is not None,
            "word_count": _trie.size() if _trie is not None else 0,
        }

    @application.post("/solve")
    async def solve(body: SolveRequest, background_tasks: BackgroundTasks):
        from letterboxed.metrics import SearchMetrics
        from letterboxed.ranking import top_words
        from letterboxed.solver import number_of_solutions, valid_words
        from letterboxed.notifier import send_notification

        box = _parse_box_or_400(body.letters)
        logger.info("POST /solve letters=%s", box)

        metrics = SearchMetrics(str(box))

        with metrics.stage("valid_words"):
            all_words = valid_words(_trie, box)
        metrics.record("valid_word_count", len(all_words))

        with metrics.stage("count_solutions"):
            metrics.record("solutions", number_of_solutions(_trie, box))

        words = top_words(all_words, settings.MAX_RESULTS)
        report = metrics.report()

        if settings.NOTIFY_ENABLED:
            background_tasks.add_task(
                send_notification, report, words, settings.NTFY_TOPIC, settings.NTFY_URL,
            )

        return JSONResponse({
            **report,
            "sides": list(box.sides),
            "words": words,
            "processing_time": metrics.total_ms,
        })

    @application.get("/words/{letter}")
    async def words_for_letter(letter: str, letters: str):
        from letterboxed.solver import InvalidLetterError, words_starting_with_letter

        box = _parse_box_or_400(letters)
        if len(letter) != 1:
            raise HTTPException(400, f"Expected a single letter, got: {letter!r}")
        try:
            words = words_starting_with_letter(_trie, box, letter)
        except InvalidLetterError as e:
            raise HTTPException(400, str(e))

        limit = settings.MAX_RESULTS
        return {
            "letter": letter.upper(),
            "total": len(words),
            "words": words[:limit] if limit > 0 else words,
        }

    @application.get("/explore")
    async def explore(token: str, prefix: str = ""):
        from dataclasses import asdict
        result = _trie.explore(token, prefix.upper())
        return asdict(result)

    @application.get("/api/settings")
    async def api_get_settings():
        from letterboxed.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from letterboxed.settings import update_settings, get_editable_settings
        body = await request.json()
        errors = update_settings(settings, **body)
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


app = create_app()
