import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.config import API_HOST, API_PORT, LOG_LEVEL
from app.dispatcher import dispatch, list_tools
from app.errors import RentalError
from app.schemas import ToolCall
from app.texts import AGENT_PERSONA

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Vietnam Rental Assistant API")


@app.exception_handler(RentalError)
async def rental_error_handler(request: Request, exc: RentalError):
    logger.warning("Tool error %s on %s", exc.code, request.url.path)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.to_dict()})


@app.get("/")
async def root():
    return {
        "message": f"{AGENT_PERSONA['name']} ({AGENT_PERSONA['username']}) is up. "
                   "GET /tools to list tools, POST /tools/call to use one."
    }


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/tools")
async def tools():
    return {"tools": list_tools()}


@app.post("/tools/call")
async def call_tool(call: ToolCall):
    try:
        return await dispatch(call.name, call.arguments)
    except RentalError:
        raise
    except Exception:
        logger.exception("Unexpected error in tool %s", call.name)
        return JSONResponse(
            status_code=500,
            content={"error": {"code": "INTERNAL_ERROR", "message": "Something went wrong on my side. Try again in a moment."}},
        )


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=API_HOST, port=API_PORT)


if __name__ == "__main__":
    run()
