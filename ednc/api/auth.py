from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ednc.api.deps import get_db, get_current_principal
from ednc.core.access import Principal
from ednc.core.security import create_instructor_token
from ednc.crud import instructor as crud_instructor
from ednc.schemas.instructor import AuthOut, InstructorCreate, InstructorLogin, InstructorOut

router = APIRouter()


@router.post("/register", response_model=AuthOut, status_code=status.HTTP_201_CREATED)
def register(instructor_in: InstructorCreate, db: Session = Depends(get_db)):
    # self-registered accounts are never admins
    instructor = crud_instructor.create_instructor(db, instructor_in)
    return {"token": create_instructor_token(instructor), "instructor": instructor}


@router.post("/login", response_model=AuthOut)
def login(form: InstructorLogin, db: Session = Depends(get_db)):
    instructor = crud_instructor.authenticate(db, form.email, form.password)
    return {"token": create_instructor_token(instructor), "instructor": instructor}


@router.get("/me", response_model=InstructorOut)
def me(principal: Principal = Depends(get_current_principal)):
    """Identity carried by the token, no database round trip."""
    return InstructorOut(
        id=principal.id,
        name=principal.name or "",
        email=principal.email or "",
        is_admin=principal.is_admin,
    )
