# backend/patternbook/examples/creational/singleton.py
"""
Singleton - Database connection pool

Q: How do you make sure the whole application shares exactly one
connection pool, even when several threads ask for it at the same time?
"""

import threading
from typing import List, Optional


class Connection:
    """A fake database connection"""

    def __init__(self, conn_id: int):
        self.conn_id = conn_id
        self.in_use = False

    def execute(self, query: str) -> str:
        message = f"[conn-{self.conn_id}] executing: {query}"
        print(message)
        return message


class ConnectionPool:
    """
    Process-wide pool of fake connections.

    Always obtain it through ``ConnectionPool.get_instance()``. Creation is
    guarded by a class-level lock (double-checked), so concurrent first
    access still produces a single pool.
    """

    _instance: Optional["ConnectionPool"] = None
    _lock = threading.Lock()

    def __init__(self, size: int = 3):
        if ConnectionPool._instance is not None:
            raise RuntimeError("ConnectionPool is a singleton; use ConnectionPool.get_instance()")
        self.size = size
        self._connections: List[Connection] = [Connection(i + 1) for i in range(size)]
        self._pool_lock = threading.Lock()
        print(f"Connection pool created with {size} connections")

    @classmethod
    def get_instance(cls, size: int = 3) -> "ConnectionPool":
        if cls._instance is None:
            with cls._lock:
                # another thread may have created it while we waited
                if cls._instance is None:
                    cls._instance = cls(size)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the current instance (used by tests)"""
        with cls._lock:
            cls._instance = None

    @property
    def available(self) -> int:
        with self._pool_lock:
            return sum(1 for c in self._connections if not c.in_use)

    def acquire(self) -> Connection:
        with self._pool_lock:
            for conn in self._connections:
                if not conn.in_use:
                    conn.in_use = True
                    print(f"Acquired connection {conn.conn_id}")
                    return conn
        raise RuntimeError(f"No free connections (pool size {self.size})")

    def release(self, conn: Connection) -> None:
        with self._pool_lock:
            conn.in_use = False
        print(f"Released connection {conn.conn_id}")


def demo() -> dict:
    pool = ConnectionPool.get_instance()
    same_pool = ConnectionPool.get_instance()

    conn = pool.acquire()
    conn.execute("SELECT * FROM orders")
    pool.release(conn)

    print(f"Both references point to the same pool: {pool is same_pool}")
    return {
        "same_instance": pool is same_pool,
        "pool_size": pool.size,
        "available": pool.available,
    }
