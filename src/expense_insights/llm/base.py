from abc import ABC, abstractmethod


class TextGenerator(ABC):
    @abstractmethod
    def generate(self, prompt: str, model: str) -> str:
        """Send the prompt to the named model and return its text."""
        pass
