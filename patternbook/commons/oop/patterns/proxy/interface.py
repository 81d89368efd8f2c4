from abc import ABC, abstractmethod


class ISubject(ABC):
    """
    The interface shared by a real subject and its proxy, so that a
    proxy may be passed wherever a real subject is expected.
    """

    @abstractmethod
    def request(self):
        ...
