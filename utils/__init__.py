from utils.get_endpoint import get_endpoint
from utils.response_utils import robust_parse_text
from utils.formatting import to_pretty_json, is_empty_response
from utils.bb_request import make_bb_request

__all__ = ["get_endpoint", "robust_parse_text", "to_pretty_json", "is_empty_response", "make_bb_request"]
