from sqlalchemy import Column, Integer, Text, String, Boolean, Float, DateTime
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()

class DemoRunLog(Base):
    __tablename__ = "demo_run_logs"

    id = Column(Integer, primary_key=True)
    pattern_id = Column(String(100), nullable=False, index=True)
    output = Column(Text)
    succeeded = Column(Boolean, default=False)
    error = Column(Text)
    duration_ms = Column(Float, default=0.0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "pattern_id": self.pattern_id,
            "output": self.output,
            "succeeded": self.succeeded,
            "error": self.error,
            "duration_ms": self.duration_ms,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
