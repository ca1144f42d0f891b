import logging
from uuid import UUID
from fastapi import APIRouter, HTTPException, Depends, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard.core.database import get_db
from jobboard.core.deps import BearerProtectedRoute, get_job_id
from jobboard.crud import job as job_crud
from jobboard.schemas.job import JobCreateRequest, JobUpdateRequest, JobResponse

# Token check is switched on per app through app.state.auth_enabled
router = APIRouter(prefix="/jobs", tags=["Jobs"], route_class=BearerProtectedRoute)
logger = logging.getLogger(__name__)


@router.get("", response_model=list[JobResponse])
def list_jobs(db: Session = Depends(get_db)):
    """List every job posting."""
    return job_crud.get_multi(db)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=JobResponse)
def create_job(
    request: JobCreateRequest,
    db: Session = Depends(get_db)
):
    """
    Create a new job posting.

    Returns the stored job, including its assigned id.
    """
    try:
        new_job = job_crud.create(db, request)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating job: {e}")
        raise HTTPException(status_code=500, detail="Failed to create job")

    logger.info(f"Created job {new_job.id}: {new_job.title}")
    return new_job


@router.get("/{job_id}", response_model=JobResponse)
def get_job(job_id: UUID = Depends(get_job_id), db: Session = Depends(get_db)):
    """Retrieve a job by ID."""
    job = job_crud.get_by_id(db, job_id)

    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    return job


@router.put("/{job_id}", response_model=JobResponse)
def update_job(
    request: JobUpdateRequest,
    job_id: UUID = Depends(get_job_id),
    db: Session = Depends(get_db)
):
    """
    Update a job by ID.

    Only the fields present in the body are changed; the rest keep their
    stored values. A partial company object is merged into the stored one.
    """
    try:
        job = job_crud.update(db, job_id, request)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating job {job_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update job")

    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    logger.info(f"Updated job {job_id}")
    return job


@router.delete("/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_job(job_id: UUID = Depends(get_job_id), db: Session = Depends(get_db)):
    """
    Delete a job by ID.
    """
    try:
        deleted = job_crud.delete(db, job_id)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error deleting job {job_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete job")

    if not deleted:
        raise HTTPException(status_code=404, detail="Job not found")

    logger.info(f"Deleted job {job_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
