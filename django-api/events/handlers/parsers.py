from rest_framework.parsers import JSONParser


class AnyMediaTypeJSONParser(JSONParser):
    """Decodes the body as JSON whatever Content-Type the client sent."""

    media_type = "*/*"
