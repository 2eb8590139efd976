class ChatError(Exception):
    pass

class ProtocolError(ChatError):
    """Inbound message the session cannot act on. The connection should be closed."""

class MessageParseError(ProtocolError):
    pass

class JokeFetchError(ChatError):
    pass
