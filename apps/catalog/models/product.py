from decimal import Decimal

from django.db import models
from django.utils.text import slugify


class ProductStatus(models.TextChoices):
    IN_STOCK = 'in stock', 'in stock'
    SOLD_OUT = 'sold out', 'sold out'
    COMING_SOON = 'coming soon', 'coming soon'


class Product(models.Model):
    """Catalog product; price is stored in cents"""
    name = models.CharField(max_length=255, unique=True)
    slug = models.SlugField(max_length=255, help_text="Derived from name when the product is created")
    price = models.IntegerField(help_text="Price in cents")
    status = models.CharField(max_length=20, choices=ProductStatus.choices, default=ProductStatus.IN_STOCK)
    is_active = models.BooleanField(default=True)
    category = models.ForeignKey(
        'Category',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='products',
    )
    tags = models.ManyToManyField('Tag', through='ProductTag', related_name='products', blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'products'

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        # The slug is only ever derived on insert
        if self._state.adding and not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)

    @property
    def price_amount(self):
        """Price in currency units"""
        return Decimal(self.price) / 100
