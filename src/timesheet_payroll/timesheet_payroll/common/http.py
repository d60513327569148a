from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify
from werkzeug.exceptions import HTTPException

from ..core.exceptions import FormatError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def api_errors(view):
    """Translate domain errors raised by a JSON view into error responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except (FormatError, ValidationError) as e:
            return jsonify({"success": False, "error": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"success": False, "error": str(e)}), 404
        except HTTPException:
            raise
        except Exception:
            logger.exception("Unhandled error in %s", view.__name__)
            return jsonify({"success": False, "error": "Internal server error"}), 500

    return wrapper
