from rest_framework.exceptions import APIException


class TournamentNotFoundError(APIException):

    def __init__(self, tournament_id):
        self.status_code = 404
        self.detail = f"Tournament {tournament_id} not found"


class SettingsNotFoundError(APIException):

    def __init__(self):
        self.status_code = 404
        self.detail = "Settings not found"


class NoScoresRecordedError(APIException):

    def __init__(self, tournament_id):
        self.status_code = 400
        self.detail = f"No scores found for tournament {tournament_id}"


class StorageFailureError(APIException):

    def __init__(self, message="Failed to complete tournament"):
        self.status_code = 500
        self.detail = message
