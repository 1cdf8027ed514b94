from pgn_import.models.import_error_payload import ImportErrorPayload
from pgn_import.models.imported_game_payload import ImportedGamePayload

__all__ = ["ImportErrorPayload", "ImportedGamePayload"]
