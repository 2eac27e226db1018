class NormRefError(Exception):
    status_code = 500


class ConfigError(NormRefError):
    pass


class InputError(NormRefError):
    status_code = 400


class AuthError(NormRefError):
    status_code = 401


class PayloadTooLargeError(NormRefError):
    status_code = 413

    def __init__(self, max_chars: int, received_chars: int) -> None:
        super().__init__("Payload too large")
        self.max_chars = max_chars
        self.received_chars = received_chars
