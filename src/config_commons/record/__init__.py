from .send import BufferSend, Send

__all__ = ["BufferSend", "Send"]
