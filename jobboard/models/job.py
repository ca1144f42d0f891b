import enum
import uuid
from sqlalchemy import Column, String, Enum, JSON, Uuid
from jobboard.core.database import Base


class JobType(str, enum.Enum):
    """Employment type of a job posting."""
    FULL_TIME = "Full-Time"
    PART_TIME = "Part-Time"


class Job(Base):
    """
    Job posting.

    The hiring company is embedded as a single JSON document
    ({"name", "contactEmail", "contactPhone"}) rather than a separate table.
    """
    __tablename__ = "jobs"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    title = Column(String, nullable=False, index=True)
    # values_callable stores "Full-Time", not the member name
    type = Column(
        Enum(JobType, name="job_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    description = Column(String, nullable=False)
    company = Column(JSON, nullable=False)

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}', type={self.type.value})>"
