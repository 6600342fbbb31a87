# Log event / error codes
PAGE_NOT_FOUND = 'PAGE_NOT_FOUND'
HOME_PAGE_SERVED = 'HOME_PAGE_SERVED'
