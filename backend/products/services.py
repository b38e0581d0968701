from django.db import transaction
from rest_framework.exceptions import NotFound, ValidationError
from typing import List, Dict, Any
import logging

from .models import Product, Category, BundleItem

logger = logging.getLogger(__name__)


class BundleValidationService:
    """Validates the bundle composition submitted with a product."""

    @staticmethod
    def validate_bundle_items(tenant, product_type: str, bundle_items: List[Dict[str, Any]], exclude_product_id=None):
        """
        Check that the bundle components are consistent with the product type.

        BUNDLE products must list at least one component; STANDALONE and
        BUNDLE_ITEM products must list none. Every component must reference
        an existing product of the same tenant with a quantity of at least 1.

        Args:
            tenant: Tenant owning the product
            product_type: One of Product.ProductType
            bundle_items: List of {"product_id", "quantity"} dicts
            exclude_product_id: Id of the product being edited (a bundle
                cannot contain itself)

        Returns:
            list: (component product, quantity) tuples in submitted order

        Raises:
            ValidationError: On malformed or inconsistent components
            NotFound: When a component product does not exist
        """
        if not isinstance(bundle_items, list):
            raise ValidationError("Expected an array of bundle items.")

        components = []
        seen = set()
        for index, item in enumerate(bundle_items):
            if not isinstance(item, dict) or "product_id" not in item or "quantity" not in item:
                raise ValidationError(f"Invalid bundle item at index {index}.")

            product_id, quantity = item["product_id"], item["quantity"]
            if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity < 1:
                raise ValidationError(
                    f"Quantity should be at least 1. Invalid bundle item at index {index}."
                )
            if product_id in seen or (exclude_product_id is not None and product_id == exclude_product_id):
                raise ValidationError(f"Invalid bundle item at index {index}.")
            seen.add(product_id)

            product = Product.all_objects.filter(tenant=tenant, pk=product_id).first()
            if product is None:
                raise NotFound(f"Product not found. Invalid bundle item at index {index}.")

            components.append((product, quantity))

        if product_type == Product.ProductType.BUNDLE and not components:
            raise ValidationError("bundle_items cannot be empty in Bundle.")

        if product_type != Product.ProductType.BUNDLE and components:
            raise ValidationError(
                "bundle_items must be empty for Standalone and Bundle Item types."
            )

        return components


class ProductService:
    @staticmethod
    @transaction.atomic
    def create_product(tenant=None, **kwargs):
        """
        Creates a new product together with its bundle components.

        Args:
            tenant: Tenant from request.tenant (required for tenant isolation)
            **kwargs: The data for the product, with optional "bundle_items".

        Raises:
            ValueError: If tenant is not provided
            ValidationError: If the category or bundle composition is invalid
        """
        if not tenant:
            raise ValueError("Tenant is required to create a product")

        bundle_items = kwargs.pop("bundle_items", [])
        product_type = kwargs.get("product_type", Product.ProductType.STANDALONE)

        ProductService._check_category(tenant, kwargs.get("category"))
        components = BundleValidationService.validate_bundle_items(
            tenant, product_type, bundle_items
        )

        product = Product.all_objects.create(tenant=tenant, **kwargs)
        ProductService._replace_bundle_items(product, components)

        logger.info(f"Created product {product.id} ({product.product_type}) for tenant {tenant.slug}")
        return product

    @staticmethod
    @transaction.atomic
    def update_product(product: Product, **kwargs) -> Product:
        """
        Updates a product. When "bundle_items" is supplied, the bundle
        composition is replaced as a whole.
        """
        tenant = product.tenant
        bundle_items = kwargs.pop("bundle_items", None)

        if "category" in kwargs:
            ProductService._check_category(tenant, kwargs["category"])

        for field, value in kwargs.items():
            setattr(product, field, value)

        if bundle_items is None:
            # Keep the current composition, but it must still match the type
            bundle_items = [
                {"product_id": item.product_id, "quantity": item.quantity}
                for item in BundleItem.all_objects.filter(bundle=product)
            ]

        components = BundleValidationService.validate_bundle_items(
            tenant, product.product_type, bundle_items, exclude_product_id=product.pk
        )

        product.save()
        ProductService._replace_bundle_items(product, components)
        return product

    @staticmethod
    def _check_category(tenant, category):
        if category is not None and category.tenant_id != tenant.pk:
            raise ValidationError({"category": "Category does not belong to this tenant."})

    @staticmethod
    def _replace_bundle_items(product: Product, components):
        BundleItem.all_objects.filter(bundle=product).delete()
        BundleItem.all_objects.bulk_create([
            BundleItem(tenant=product.tenant, bundle=product, product=component, quantity=quantity)
            for component, quantity in components
        ])
