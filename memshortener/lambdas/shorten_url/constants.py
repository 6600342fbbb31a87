# Log event / error codes
METHOD_NOT_ALLOWED = 'METHOD_NOT_ALLOWED'
INVALID_REQUEST_BODY = 'INVALID_REQUEST_BODY'
MISSING_URL = 'MISSING_URL'
CAPACITY_EXHAUSTED = 'CAPACITY_EXHAUSTED'
SHORTEN_SUCCESS = 'SHORTEN_SUCCESS'
