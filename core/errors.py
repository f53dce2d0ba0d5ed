# core/errors.py

from fastapi import HTTPException

from core.logging_config import logger


def extract_supabase_error(error: Exception) -> str:
    """
    Pull a readable message out of Supabase client errors.
    Handles:
      • PostgREST errors (APIError.message)
      • GoTrue (Auth) errors
      • Generic Python exceptions
    """

    message = getattr(error, "message", None)
    if message:
        return str(message)

    if getattr(error, "args", None):
        return str(error.args[0])

    return str(error) or "Unknown Supabase error"


def handle_supabase_error(
    error: Exception,
    operation: str = "Database operation",
    status_code: int = 500,
) -> HTTPException:
    """
    Convert a backend failure into an HTTPException for the view that
    asked for the data. Returns (doesn't raise) so callers can re-raise.

    Args:
        error: The exception that occurred
        operation: What was attempted (e.g., "Load directory")
        status_code: Status used when no better mapping applies
    """
    error_detail = extract_supabase_error(error)
    logger.error(f"{operation}: {error_detail}")

    error_lower = error_detail.lower()
    if "duplicate" in error_lower or "unique" in error_lower:
        return HTTPException(status_code=409, detail=f"{operation}: Record already exists")
    elif "foreign key" in error_lower:
        return HTTPException(status_code=400, detail=f"{operation}: Invalid reference")
    elif "not found" in error_lower or "does not exist" in error_lower:
        return HTTPException(status_code=404, detail=f"{operation}: Resource not found")
    else:
        return HTTPException(status_code=status_code, detail=f"{operation} failed")
