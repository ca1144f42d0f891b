"""
CRUD operations for Job model.

Implements the Repository pattern to encapsulate all database operations
for jobs, providing a clean interface for the API layer.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session
from jobboard.models.job import Job
from jobboard.schemas.job import JobCreateRequest, JobUpdateRequest


def create(db: Session, job_data: JobCreateRequest) -> Job:
    """
    Create a new job in the database.

    Args:
        db: Database session
        job_data: Validated job creation data

    Returns:
        Created Job instance with its store-assigned id
    """
    db_job = Job(
        title=job_data.title,
        type=job_data.type,
        description=job_data.description,
        company=job_data.company.model_dump(by_alias=True),
    )

    db.add(db_job)
    db.commit()
    db.refresh(db_job)

    return db_job


def get_by_id(db: Session, job_id: UUID) -> Optional[Job]:
    """
    Retrieve a job by its ID.

    Returns:
        Job instance if found, None otherwise
    """
    return db.query(Job).filter(Job.id == job_id).first()


def get_multi(db: Session) -> List[Job]:
    """Retrieve every job in the collection."""
    return db.query(Job).all()


def update(db: Session, job_id: UUID, job_data: JobUpdateRequest) -> Optional[Job]:
    """
    Merge the fields present in job_data into an existing job.

    Fields that were not sent are left untouched. A partial company object
    is merged key by key into the stored company.

    Returns:
        Updated Job instance if found, None otherwise
    """
    job = get_by_id(db, job_id)
    if not job:
        return None

    changes = job_data.model_dump(exclude_unset=True, by_alias=True)

    company_changes = changes.pop("company", None)
    if company_changes:
        # Assign a new dict so the JSON column is flagged dirty
        job.company = {**job.company, **company_changes}

    for field, value in changes.items():
        setattr(job, field, value)

    db.commit()
    db.refresh(job)

    return job


def delete(db: Session, job_id: UUID) -> bool:
    """
    Delete a job by ID.

    Returns:
        True if deleted, False if not found
    """
    job = get_by_id(db, job_id)
    if not job:
        return False

    db.delete(job)
    db.commit()

    return True


def count(db: Session) -> int:
    """Count all jobs."""
    return db.query(Job).count()
