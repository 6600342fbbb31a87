# Log event codes
NOT_A_FORM_SUBMISSION = 'NOT_A_FORM_SUBMISSION'
INVALID_REQUEST_BODY = 'INVALID_REQUEST_BODY'
MISSING_URL = 'MISSING_URL'
CAPACITY_EXHAUSTED = 'CAPACITY_EXHAUSTED'
SHORTEN_SUCCESS = 'SHORTEN_SUCCESS'
