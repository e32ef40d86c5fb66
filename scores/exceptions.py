from rest_framework.exceptions import APIException


class EmptyScoresError(APIException):

    def __init__(self):
        self.status_code = 400
        self.detail = "Scores array is required"


class InvalidHoleError(APIException):

    def __init__(self, hole_id):
        self.status_code = 400
        self.detail = f"Hole {hole_id} is not part of this tournament"
