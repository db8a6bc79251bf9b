from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import Problem

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])

HISTORY_LIMIT = 20


@router.get("/{email}")
def dashboard(email: str, db: Session = Depends(get_db)):
	email = (email or "").strip()
	if not email:
		raise HTTPException(status_code=400, detail="Email is required")
	rows = (
		db.query(Problem)
		.filter(Problem.user_email == email)
		.order_by(Problem.created_at.desc(), Problem.id.desc())
		.limit(HISTORY_LIMIT)
		.all()
	)
	return {"problems": [row.to_dict() for row in rows]}
