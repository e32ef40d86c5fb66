from rest_framework.exceptions import APIException


class PlayerAlreadyRegisteredError(APIException):

    def __init__(self):
        self.status_code = 409
        self.detail = "Player already registered for this tournament"


class PlayerNotRegisteredError(APIException):

    def __init__(self):
        self.status_code = 404
        self.detail = "Player not found in this tournament"
