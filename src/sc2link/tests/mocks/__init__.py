from sc2link.tests.mocks.connection import BlockingConnection, EchoEngineConnection, MockConnection

__all__ = ["BlockingConnection", "EchoEngineConnection", "MockConnection"]
