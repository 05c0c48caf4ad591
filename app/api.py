"""
FastAPI routes for parsing bank notifications.
Thin API layer over the transaction service.
"""
from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from core.config import get_settings
from core.exceptions import TransactionProcessingError
from core.logger import setup_logger
from core.schema import ParseRequest
from services.transaction_service import TransactionService

logger = setup_logger(__name__)
settings = get_settings()

# Initialize FastAPI app
app = FastAPI(
    title="Bank Message Parser",
    description="Parse Persian bank transaction notifications into structured records",
    version="1.0.0"
)

# Service instance
transaction_service = TransactionService()


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "bank_message_parser",
        "version": "1.0.0"
    }


@app.post("/parse")
def parse_message(request: ParseRequest):
    """
    Parse a single bank notification.

    Args:
        request: Message text to parse

    Returns:
        Parsed transaction, or 422 with the reason and format examples
    """
    try:
        result = transaction_service.process_message(request.text)
    except TransactionProcessingError as e:
        logger.error(f"Parse request failed: {e.message}")
        raise HTTPException(status_code=500, detail=e.message)

    if result["status"] == "rejected":
        return JSONResponse(status_code=422, content=result)

    return result


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
