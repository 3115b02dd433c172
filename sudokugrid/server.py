"""HTTP API for generating, solving and checking Sudoku puzzles."""

from __future__ import annotations
import logging
import os
import time
from typing import List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .core.codec import grid_from_rows, parse_box, parse_grid
from .core.errors import GenerationError, SudokuError
from .core.grid import MAX_GRID_SIZE, Grid
from .core.rng import new_rng
from .generator import DEFAULT_ATTEMPTS, Difficulty, SudokuGenerator
from .solvers import BacktrackingSolver, hint

logger = logging.getLogger(__name__)

NO_STORE_HEADERS = {
    "Cache-Control": "no-store",
    "X-Content-Type-Options": "nosniff",
}


class GenerateRequest(BaseModel):
    difficulty: str = ""
    includeSolution: bool = False
    size: int = 0
    box: str = ""
    attempts: int = 0
    seed: Optional[int] = None


class PuzzleRequest(BaseModel):
    puzzle: Optional[List[List[int]]] = None
    string: Optional[str] = None
    size: int = 9
    box: str = ""


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _box_dims(box: str) -> tuple:
    """(box_rows, box_cols) from a box string, or square-root boxes when empty."""
    if not box:
        return None, None
    try:
        return parse_box(box)
    except SudokuError:
        raise HTTPException(status_code=400, detail="invalid box dims") from None


def _load_puzzle(req: PuzzleRequest) -> Grid:
    """Build the request's grid; any malformed or illegal input is a 400."""
    if req.puzzle is not None:
        box_rows, box_cols = _box_dims(req.box)
        try:
            return grid_from_rows(req.puzzle, box_rows, box_cols)
        except SudokuError:
            raise HTTPException(status_code=400, detail="invalid puzzle") from None
    if req.string:
        box_rows, box_cols = _box_dims(req.box)
        try:
            return parse_grid(req.string.strip(), req.size, box_rows, box_cols)
        except SudokuError:
            raise HTTPException(status_code=400, detail="invalid puzzle string") from None
    raise HTTPException(status_code=400, detail="missing puzzle")


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(title="sudokugrid", version=__version__)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        response.headers.update(NO_STORE_HEADERS)
        logger.info("%s %s %d %.1fms", request.method, request.url.path,
                    response.status_code, (time.perf_counter() - start) * 1000)
        return response

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        response = _error(exc.status_code, str(exc.detail).lower())
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError):
        return _error(400, "invalid json")

    @app.get("/healthz")
    @app.get("/health")
    def health():
        return {"status": "ok", "version": __version__}

    @app.post("/generate")
    def generate(req: GenerateRequest):
        try:
            difficulty = Difficulty.from_name(req.difficulty or Difficulty.EASY.value)
        except ValueError:
            return _error(400, "invalid difficulty")
        attempts = req.attempts if req.attempts >= 1 else DEFAULT_ATTEMPTS

        classic = req.size == 0 and not req.box
        if classic:
            size, box_rows, box_cols = 9, 3, 3
        else:
            if req.size <= 0 or not req.box:
                return _error(400, "size and box required for variable grid")
            if req.size > MAX_GRID_SIZE:
                return _error(400, f"grid size {req.size} exceeds maximum allowed ({MAX_GRID_SIZE})")
            size = req.size
            box_rows, box_cols = _box_dims(req.box)
            if box_rows * box_cols != size:
                return _error(400, "invalid box dims")

        generator = SudokuGenerator(size, box_rows, box_cols, rng=new_rng(req.seed))
        try:
            puzzle, solution = generator.generate_with_solution(difficulty, attempts)
        except GenerationError:
            return _error(500, "generation failed")

        if classic:
            res = {"puzzle": puzzle.to_list()}
        else:
            res = {
                "size": puzzle.size,
                "boxR": puzzle.box_rows,
                "boxC": puzzle.box_cols,
                "puzzle": puzzle.to_list(),
            }
        if req.includeSolution:
            res["solution"] = solution.to_list()
        return res

    @app.post("/solve")
    def solve(req: PuzzleRequest):
        grid = _load_puzzle(req)
        solution, _ = BacktrackingSolver(rng=new_rng()).solve(grid)
        if solution is None:
            return _error(422, "unsolvable")
        return {"solution": solution.to_list()}

    @app.post("/hint")
    def suggest(req: PuzzleRequest):
        grid = _load_puzzle(req)
        result = hint(grid, rng=new_rng())
        if result is None:
            return _error(422, "no hint available")
        row, col, value = result
        return {"row": row, "col": col, "val": value}

    @app.post("/validate")
    def check(req: PuzzleRequest):
        if req.puzzle is None and not req.string:
            return _error(400, "missing puzzle")
        try:
            if req.puzzle is not None:
                grid_from_rows(req.puzzle, *_box_dims(req.box))
            else:
                parse_grid(req.string.strip(), req.size, *_box_dims(req.box))
        except SudokuError as e:
            return _error(400, str(e))
        return {"valid": True}

    return app


app = create_app()


def main():
    """Run the API server with uvicorn on $HOST:$PORT."""
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", "8080"))
    logger.info("listening on %s:%d", host, port)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
