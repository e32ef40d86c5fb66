from rest_framework.exceptions import APIException


class EmptyPatchError(APIException):

    def __init__(self):
        self.status_code = 400
        self.detail = "No fields provided to update"
