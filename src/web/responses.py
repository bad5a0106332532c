"""Response conventions for the BlueBloom API.

Every JSON endpoint follows one of the shapes below.

CONVENTIONS
-----------

1. GET single result (summary, fit score, investor view, ...):
   Return a StandardResponse envelope (src.core.schemas).
   Example: {"status": "success", "data": {"score": 87, "label": "High"}, "message": null}

2. GET collection:
   Return: {"status": "success", "data": [...], "total": int}
   Example: {"status": "success", "data": [{...}], "total": 5}

3. POST mutation (case study creation):
   Return: {"status": "success", "message": "...", "<resource>_id": str, ...}
   Example: {"status": "success", "message": "Case study created", "case_study_id": "case_ab12cd34"}

4. Text renderings (pitch, pilot and case study with format=text|markdown):
   Return text/plain with no envelope.

ERRORS
------
All errors use standard FastAPI HTTPException, which returns:
   {"detail": "Human-readable error message"}

STATUS CODES
------------
- 200: Success
- 400: Invalid input the handler rejects (bad week range, mismatched ids)
- 404: Unknown actor, region key or case study
- 422: Request validation failure
- 503: Data files unreadable
"""

from typing import Any, Dict, List


def collection(data: List[Dict]) -> Dict[str, Any]:
    """Wrap a list result."""
    return {
        "status": "success",
        "data": data,
        "total": len(data),
    }


def success(message: str = "OK", **extra) -> Dict[str, Any]:
    """Standard mutation response."""
    return {"status": "success", "message": message, **extra}
