from django.db import models


class ProductTag(models.Model):
    """Join row between a product and a tag, no attributes of its own"""
    product = models.ForeignKey('Product', on_delete=models.CASCADE, related_name='product_tags')
    tag = models.ForeignKey('Tag', on_delete=models.PROTECT)

    class Meta:
        db_table = 'product_tag'
        unique_together = ['product', 'tag']

    def __str__(self):
        return f"{self.product.name} - {self.tag.name}"
