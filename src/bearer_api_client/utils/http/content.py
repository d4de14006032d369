"""Request body encoding."""

from typing import Dict, Optional, Tuple

JSON_MEDIA_TYPE = "application/json"
JSON_CONTENT_TYPE = f"{JSON_MEDIA_TYPE}; charset=utf-8"


def build_json_content(content: Optional[str]) -> Optional[Tuple[bytes, Dict[str, str]]]:
    """Encode JSON text as a UTF-8 body with its content headers.

    :param content: JSON text; blank or None means no body
    :type content: Optional[str]
    :return: Encoded body and headers, or None when there is no body
    :rtype: Optional[Tuple[bytes, Dict[str, str]]]
    """
    if content is None or not content.strip():
        return None
    return content.encode("utf-8"), {"Content-Type": JSON_CONTENT_TYPE}
