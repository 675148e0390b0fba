from .backend_payload_mapper import BackendPayloadMapper

__all__ = ["BackendPayloadMapper"]
