"""
HueWheel Request ID Utilities
"""
import uuid
from datetime import datetime


def generate_request_id(prefix: str = "hue") -> str:
    """
    Generate a unique id for one analysis request.

    Returns:
        String like ``hue-20250101120000-1a2b3c4d``
    """
    timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
    return f"{prefix}-{timestamp}-{uuid.uuid4().hex[:8]}"
