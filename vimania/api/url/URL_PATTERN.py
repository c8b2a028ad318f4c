import re

# http(s):// followed by a greedy run of URL characters
URL_PATTERN = re.compile(r"https?://[A-Za-z0-9.\-_~:/?#\[\]@!$&'()*+,;=%]+")
