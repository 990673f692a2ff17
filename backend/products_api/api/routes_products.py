from typing import List, Optional

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from products_api.db import get_db
from products_api.repositories.commands import (
    DeleteCommand,
    InsertCommand,
    UpdateCommand,
)
from products_api.repositories.product_repo import ProductRepository
from products_api.schemas.product_schema import ProductIn, ProductOut, ProductUpdate

router = APIRouter(tags=["products"])


@router.get("", summary="List products", response_model=List[ProductOut])
def list_products(db: Session = Depends(get_db)):
    repo = ProductRepository(db)
    return repo.list()


# Missing ids answer 200 with a null body rather than 404.
@router.get("/{product_id}", summary="Get product by id", response_model=Optional[ProductOut])
def get_product(product_id: int, db: Session = Depends(get_db)):
    repo = ProductRepository(db)
    return repo.get_by_id(product_id)


@router.post("", summary="Create product", response_model=ProductOut)
def create_product(payload: ProductIn, db: Session = Depends(get_db)):
    repo = ProductRepository(db)
    (p,) = repo.execute(
        InsertCommand(
            id=payload.id,
            product_name=payload.product_name,
            unit_price=payload.unit_price,
        )
    )
    return p


@router.put("", summary="Replace product", response_model=ProductOut)
def update_product(payload: ProductUpdate, db: Session = Depends(get_db)):
    repo = ProductRepository(db)
    # echo the stored row so the response matches a following GET
    (p,) = repo.execute(
        UpdateCommand(
            id=payload.id,
            product_name=payload.product_name,
            unit_price=payload.unit_price,
        )
    )
    return p


@router.delete("/{product_id}", summary="Delete product")
def delete_product(product_id: int, db: Session = Depends(get_db)):
    repo = ProductRepository(db)
    if repo.get_by_id(product_id) is None:
        return Response(status_code=200)
    repo.execute(DeleteCommand(id=product_id))
    return Response(status_code=200)
