"""Abstract contract for publishing messages."""

from abc import ABC, abstractmethod


class MessageBus(ABC):
    """Contract for handing messages to a broker.

    A successful publish only means the broker accepted the message.
    """

    @abstractmethod
    def publish(self, topic: str, payload: str) -> str:
        """Publish `payload` to `topic` and wait for acknowledgment.

        Returns:
            Broker-assigned message id

        Raises:
            PublishError: If the broker rejects the message or cannot be reached
        """
