# Log event / error codes
METHOD_NOT_ALLOWED = 'METHOD_NOT_ALLOWED'
MALFORMED_PATH = 'MALFORMED_PATH'
SHORT_URL_NOT_FOUND = 'SHORT_URL_NOT_FOUND'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
