from datetime import timedelta

from django import forms
from django.contrib import admin
from django.contrib.admin.options import IncorrectLookupParameters
from django.urls import reverse
from django.utils import timezone
from django.utils.html import format_html, format_html_join

from .models import Category, Product, ProductTag, Tag
from .resources import CREATE, EDIT, ProductResource

TABLE = ProductResource.table()
FORM = ProductResource.form()


class ProductTagInline(admin.TabularInline):
    """Tags relation manager"""
    model = ProductTag
    extra = 1
    fields = ['tag']
    autocomplete_fields = ['tag']


class DateBoundListFilter(admin.SimpleListFilter):
    """List filter backed by one of the resource's date filters"""

    def lookups(self, request, model_admin):
        today = timezone.localdate()
        return [
            (today.isoformat(), 'Today'),
            ((today - timedelta(days=7)).isoformat(), '7 days ago'),
            ((today - timedelta(days=30)).isoformat(), '30 days ago'),
            (today.replace(month=1, day=1).isoformat(), 'Start of year'),
        ]

    def queryset(self, request, queryset):
        try:
            return TABLE.filter(self.parameter_name).apply(queryset, self.value())
        except ValueError as e:
            raise IncorrectLookupParameters(e)


class CreatedFromFilter(DateBoundListFilter):
    title = 'created from'
    parameter_name = 'created_from'


class CreatedUntilFilter(DateBoundListFilter):
    title = 'created until'
    parameter_name = 'created_until'


class ProductChangeListForm(forms.ModelForm):
    """Inline-editable table columns"""

    class Meta:
        model = Product
        fields = [column.name for column in TABLE.editable_columns()]

    def clean_name(self):
        name = self.cleaned_data['name']
        min_length = [int(rule.partition(':')[2]) for rule in TABLE.column('name').rules if rule.startswith('min:')]
        if min_length and len(name) < min_length[0]:
            raise forms.ValidationError(f'Ensure this value has at least {min_length[0]} characters.')
        return name


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'created_at']
    search_fields = ['name']
    ordering = ['name']


@admin.register(Tag)
class TagAdmin(admin.ModelAdmin):
    list_display = ['name', 'created_at']
    search_fields = ['name']
    ordering = ['name']


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = [
        'name', 'display_price', 'is_active', 'status',
        'category_name', 'tag_badges', 'created_since', 'row_actions',
    ]
    # The first column is editable, so rows link through row_actions instead
    list_display_links = None
    list_editable = [column.name for column in TABLE.editable_columns()]
    list_filter = ['status', 'category', CreatedFromFilter, CreatedUntilFilter]
    search_fields = [column.name for column in TABLE.searchable_columns()]
    ordering = TABLE.ordering()
    readonly_fields = ['created_at', 'updated_at']
    radio_fields = {'status': admin.VERTICAL}
    inlines = [ProductTagInline]

    def get_changelist_form(self, request, **kwargs):
        return ProductChangeListForm

    def get_fieldsets(self, request, obj=None):
        operation = EDIT if obj is not None else CREATE
        return [
            (step.label, {'fields': [form_field.attribute for form_field in step.visible_fields(operation)]})
            for step in FORM.steps
        ]

    def get_prepopulated_fields(self, request, obj=None):
        if obj is not None:
            return {}
        return {
            target: (form_field.attribute,)
            for form_field in FORM.fields(CREATE)
            for target in form_field.fills
        }

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('category').prefetch_related('tags')

    def display_price(self, obj):
        return TABLE.column('price').display(obj)
    display_price.short_description = 'Price'
    display_price.admin_order_field = 'price'

    def category_name(self, obj):
        return TABLE.column('category.name').display(obj) or '-'
    category_name.short_description = 'Category'

    def tag_badges(self, obj):
        names = TABLE.column('tags.name').display(obj) or []
        return format_html_join(
            ' ',
            '<span style="padding: 1px 6px; border-radius: 8px; background: #eef2ff; color: #3730a3;">{}</span>',
            ((name,) for name in names),
        )
    tag_badges.short_description = 'Tags'

    def created_since(self, obj):
        return TABLE.column('created_at').display(obj)
    created_since.short_description = 'Created'
    created_since.admin_order_field = 'created_at'

    def row_actions(self, obj):
        """Edit / delete links for the row; the read-only view lives in the API"""
        links = {
            'edit': reverse('admin:catalog_product_change', args=[obj.pk]),
            'delete': reverse('admin:catalog_product_delete', args=[obj.pk]),
        }
        return format_html_join(
            ' | ',
            '<a href="{}">{}</a>',
            ((links[action], action.capitalize()) for action in TABLE.actions if action in links),
        )
    row_actions.short_description = 'Actions'
