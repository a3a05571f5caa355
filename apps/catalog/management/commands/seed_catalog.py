"""
Django management command to seed the catalog with sample categories, tags
and products
"""
from django.core.management.base import BaseCommand
from django.db import transaction

from apps.catalog.models import Category, Product, ProductStatus, Tag
from apps.catalog.services import ProductService


class Command(BaseCommand):
    help = 'Seed the catalog with sample categories, tags and products'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show what would be created without making changes',
        )

    def handle(self, *args, **options):
        dry_run = options['dry_run']
        self.stdout.write('Seeding catalog...')

        with transaction.atomic():
            categories = self.create_named(Category, ['Accessories', 'Hardware', 'Software'], dry_run)
            tags = self.create_named(Tag, ['new', 'sale', 'bestseller'], dry_run)
            self.create_products(categories, tags, dry_run)

        self.stdout.write(self.style.SUCCESS('Catalog seeding completed!'))

    def create_named(self, model, names, dry_run):
        records = {}
        for name in names:
            record = model.objects.filter(name=name).first()
            if record is not None:
                self.stdout.write(f"{model.__name__} already exists: {name}")
            elif dry_run:
                self.stdout.write(self.style.WARNING(f"Would create {model.__name__}: {name}"))
            else:
                record = model.objects.create(name=name)
                self.stdout.write(f"Created {model.__name__}: {name}")
            records[name] = record
        return records

    def create_products(self, categories, tags, dry_run):
        products = [
            ('Widget', 1999, ProductStatus.IN_STOCK, 'Hardware', ['new']),
            ('Gadget Pro', 4999, ProductStatus.COMING_SOON, 'Hardware', ['new', 'bestseller']),
            ('Cable Kit', 599, ProductStatus.SOLD_OUT, 'Accessories', ['sale']),
            ('Sync Suite', 12900, ProductStatus.IN_STOCK, 'Software', []),
        ]

        for name, price, status, category_name, tag_names in products:
            if Product.objects.filter(name=name).exists():
                self.stdout.write(f"Product already exists: {name}")
                continue
            if dry_run:
                self.stdout.write(self.style.WARNING(f"Would create product: {name}"))
                continue

            product = ProductService.create_product(
                {
                    'name': name,
                    'price': price,
                    'status': status,
                    'category': categories[category_name],
                },
                tags=[tags[tag_name] for tag_name in tag_names],
            )
            self.stdout.write(f"Created product: {product.name} ({product.slug})")
