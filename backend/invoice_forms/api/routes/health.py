"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - Reports the number of open form sessions (in-memory, no external checks)
"""

import logging

from fastapi import APIRouter, status

from invoice_forms.api.routes.form_sessions import _form_sessions

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "invoice-forms-api",
        "version": "1.0.0",
        "open_form_sessions": len(_form_sessions),
    }
