from django.db import migrations, models
from django.utils.text import slugify


def populate_slugs(apps, schema_editor):
    """Derive slugs for products created before the column existed"""
    Product = apps.get_model('catalog', 'Product')
    for product in Product.objects.filter(slug=''):
        product.slug = slugify(product.name)
        product.save(update_fields=['slug'])


class Migration(migrations.Migration):

    dependencies = [
        ('catalog', '0001_initial'),
    ]

    operations = [
        migrations.AddField(
            model_name='product',
            name='slug',
            field=models.SlugField(default='', help_text='Derived from name when the product is created', max_length=255),
            preserve_default=False,
        ),
        migrations.RunPython(populate_slugs, migrations.RunPython.noop),
        migrations.AddField(
            model_name='product',
            name='status',
            field=models.CharField(choices=[('in stock', 'in stock'), ('sold out', 'sold out'), ('coming soon', 'coming soon')], default='in stock', max_length=20),
        ),
        migrations.AddField(
            model_name='product',
            name='is_active',
            field=models.BooleanField(default=True),
        ),
        migrations.AlterField(
            model_name='product',
            name='name',
            field=models.CharField(max_length=255, unique=True),
        ),
        migrations.AddField(
            model_name='product',
            name='tags',
            field=models.ManyToManyField(blank=True, related_name='products', through='catalog.ProductTag', to='catalog.tag'),
        ),
    ]
