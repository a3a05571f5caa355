"""
Declarative admin resource for products.

The resource is plain configuration: a two-step form wizard, a table with
columns, filters and actions, a read-only infolist and a page route map.
The Django admin (``apps.catalog.admin``) and the JSON admin API
(``apps.catalog.views``) both read these descriptors; neither defines
fields, columns or filters of its own.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional

from django.urls import reverse
from django.utils import timezone
from django.utils.dateparse import parse_date
from django.utils.text import slugify
from django.utils.timesince import timesince

from .models import Product, ProductStatus

CREATE = 'create'
EDIT = 'edit'

STATUSES = {value: label for value, label in ProductStatus.choices}

CURRENCY_SYMBOLS = {'usd': '$'}


def resolve_attribute(record, path):
    """
    Resolve a dotted attribute path such as ``category.name`` on a record.

    A to-many step (``tags.name``) yields a list with one entry per related
    object. A missing relation resolves to None.
    """
    value = record
    for index, part in enumerate(path.split('.')):
        if value is None:
            return None
        if hasattr(value, 'all') and callable(value.all):
            rest = '.'.join(path.split('.')[index:])
            return [resolve_attribute(item, rest) for item in value.all()]
        value = getattr(value, part, None)
    if hasattr(value, 'all') and callable(value.all):
        return list(value.all())
    return value


def format_money(amount, currency):
    if amount is None:
        return None
    symbol = CURRENCY_SYMBOLS.get(currency, '')
    return f"{symbol}{amount:,.2f}"


def price_state(record):
    return record.price_amount


@dataclass(frozen=True)
class FormField:
    name: str
    component: str
    required: bool = False
    unique: bool = False
    live_on_blur: bool = False
    fills: tuple = ()
    after_state_updated: Optional[Callable[[Optional[str]], dict]] = None
    hidden_on: tuple = ()
    disabled_on: tuple = ()
    options: Optional[dict] = None
    relationship: Optional[tuple] = None

    @property
    def attribute(self):
        """Model field the form field writes to"""
        if self.relationship:
            return self.relationship[0]
        return self.name

    def is_hidden(self, operation):
        return operation in self.hidden_on

    def is_disabled(self, operation):
        return operation in self.disabled_on

    def updated_state(self, state):
        """Values of dependent fields after this field's state changes"""
        if self.after_state_updated is None:
            return {}
        return self.after_state_updated(state)

    def get_options(self):
        if self.options is not None:
            return dict(self.options)
        if self.relationship:
            relation, title_attribute = self.relationship
            related_model = Product._meta.get_field(relation).related_model
            return {
                str(pk): title
                for pk, title in related_model.objects.order_by(title_attribute).values_list('pk', title_attribute)
            }
        return None

    def to_dict(self, operation):
        data = {
            'name': self.name,
            'component': self.component,
            'required': self.required,
            'hidden': self.is_hidden(operation),
            'disabled': self.is_disabled(operation),
        }
        if self.unique:
            data['unique'] = {'ignore_record': operation == EDIT}
        if self.live_on_blur:
            data['live'] = 'blur'
        if self.fills:
            data['fills'] = list(self.fills)
        options = self.get_options()
        if options is not None:
            data['options'] = options
        return data


@dataclass(frozen=True)
class Step:
    label: str
    fields: tuple

    def visible_fields(self, operation):
        return [f for f in self.fields if not f.is_hidden(operation)]

    def to_dict(self, operation):
        return {
            'label': self.label,
            'fields': [f.to_dict(operation) for f in self.visible_fields(operation)],
        }


@dataclass(frozen=True)
class Wizard:
    steps: tuple
    columns: int = 1

    def step(self, number):
        """Step by its 1-based position"""
        if number < 1 or number > len(self.steps):
            raise IndexError(f"Wizard has no step {number}")
        return self.steps[number - 1]

    def fields(self, operation=None):
        fields = [f for step in self.steps for f in step.fields]
        if operation is not None:
            fields = [f for f in fields if not f.is_hidden(operation)]
        return fields

    def field(self, name):
        for form_field in self.fields():
            if form_field.name == name:
                return form_field
        raise KeyError(name)

    def to_dict(self, operation):
        return {
            'type': 'wizard',
            'operation': operation,
            'columns': self.columns,
            'steps': [step.to_dict(operation) for step in self.steps],
        }


@dataclass(frozen=True)
class Column:
    name: str
    kind: str = 'text'
    label: Optional[str] = None
    sortable: bool = False
    searchable: bool = False
    rules: tuple = ()
    money: Optional[str] = None
    badge: bool = False
    since: bool = False
    options: Optional[dict] = None
    on_color: Optional[str] = None
    off_color: Optional[str] = None
    state: Optional[Callable[[Any], Any]] = None

    @property
    def editable(self):
        return self.kind in ('text_input', 'toggle', 'select')

    def get_label(self):
        if self.label:
            return self.label
        return self.name.split('.')[0].replace('_', ' ').capitalize()

    def get_state(self, record):
        if self.state is not None:
            return self.state(record)
        return resolve_attribute(record, self.name)

    def format_state(self, state, now=None):
        if state is None:
            return None
        if self.money:
            return format_money(state, self.money)
        if self.since:
            return f"{timesince(state, now)} ago"
        if isinstance(state, list):
            return [str(item) for item in state]
        return state

    def display(self, record, now=None):
        return self.format_state(self.get_state(record), now)

    def to_dict(self):
        data = {
            'name': self.name,
            'kind': self.kind,
            'label': self.get_label(),
            'sortable': self.sortable,
            'searchable': self.searchable,
        }
        for key in ('money', 'on_color', 'off_color'):
            if getattr(self, key):
                data[key] = getattr(self, key)
        if self.rules:
            data['rules'] = list(self.rules)
        if self.badge:
            data['badge'] = True
        if self.since:
            data['since'] = True
        if self.options is not None:
            data['options'] = dict(self.options)
        return data


@dataclass(frozen=True)
class Filter:
    name: str
    kind: str
    field: str
    lookup: str = 'exact'
    options: Optional[dict] = None
    relationship: Optional[tuple] = None

    def clean(self, value):
        """Turn a raw query value into a lookup value; empty means no filter"""
        if value in (None, ''):
            return None
        if self.kind == 'date' and isinstance(value, str):
            parsed = parse_date(value)
            if parsed is None:
                raise ValueError(f"Invalid date for {self.name}: {value!r}")
            return parsed
        return value

    def apply(self, queryset, value):
        value = self.clean(value)
        if value is None:
            return queryset
        return queryset.filter(**{f"{self.field}__{self.lookup}": value})

    def get_options(self):
        if self.options is not None:
            return dict(self.options)
        if self.relationship:
            relation, title_attribute = self.relationship
            related_model = Product._meta.get_field(relation).related_model
            return {
                str(pk): title
                for pk, title in related_model.objects.order_by(title_attribute).values_list('pk', title_attribute)
            }
        return None

    def to_dict(self):
        data = {'name': self.name, 'kind': self.kind}
        options = self.get_options()
        if options is not None:
            data['options'] = options
        return data


@dataclass(frozen=True)
class Table:
    columns: tuple
    default_sort: tuple
    filters: tuple = ()
    filters_layout: str = 'above_content'
    filters_form_columns: int = 1
    actions: tuple = ()
    bulk_actions: tuple = ()
    empty_state_actions: tuple = ()

    def column(self, name):
        for column in self.columns:
            if column.name == name:
                return column
        raise KeyError(name)

    def filter(self, name):
        for table_filter in self.filters:
            if table_filter.name == name:
                return table_filter
        raise KeyError(name)

    def editable_columns(self):
        return [c for c in self.columns if c.editable]

    def searchable_columns(self):
        return [c for c in self.columns if c.searchable]

    def sortable_columns(self):
        return [c for c in self.columns if c.sortable]

    def ordering(self, sort=None):
        """ORM ordering for ``sort`` (``name`` or ``-name``), else the default sort"""
        if sort:
            column_name = sort[1:] if sort.startswith('-') else sort
            if column_name in [c.name for c in self.sortable_columns()]:
                return [sort, '-pk' if sort.startswith('-') else 'pk']
        column_name, direction = self.default_sort
        prefix = '-' if direction == 'desc' else ''
        return [f"{prefix}{column_name}", f"{prefix}pk"]

    def apply_filters(self, queryset, data):
        for table_filter in self.filters:
            queryset = table_filter.apply(queryset, data.get(table_filter.name))
        return queryset

    def row(self, record, now=None):
        return {
            'id': record.pk,
            'state': {c.name: c.get_state(record) for c in self.columns},
            'display': {c.name: c.display(record, now) for c in self.columns},
        }

    def to_dict(self):
        column_name, direction = self.default_sort
        return {
            'columns': [c.to_dict() for c in self.columns],
            'default_sort': {'column': column_name, 'direction': direction},
            'filters': [f.to_dict() for f in self.filters],
            'filters_layout': self.filters_layout,
            'filters_form_columns': self.filters_form_columns,
            'actions': list(self.actions),
            'bulk_actions': [list(group) for group in self.bulk_actions],
            'empty_state_actions': list(self.empty_state_actions),
        }


@dataclass(frozen=True)
class Entry:
    name: str
    money: Optional[str] = None
    badge: bool = False
    date: bool = False
    color: Optional[str] = None
    state: Optional[Callable[[Any], Any]] = None

    def get_state(self, record):
        if self.state is not None:
            return self.state(record)
        return resolve_attribute(record, self.name)

    def display(self, record):
        state = self.get_state(record)
        if state is None:
            return None
        if self.money:
            return format_money(state, self.money)
        if self.date:
            if isinstance(state, datetime):
                state = timezone.localtime(state).date() if timezone.is_aware(state) else state.date()
            return state.isoformat()
        if isinstance(state, dict):
            return list(state.values())
        if isinstance(state, list):
            return [str(item) for item in state]
        return state

    def to_dict(self, record):
        data = {
            'name': self.name,
            'label': self.name.split('.')[0].replace('_', ' ').capitalize(),
            'value': self.display(record),
            'badge': self.badge,
        }
        if self.color:
            data['color'] = self.color
        return data


@dataclass(frozen=True)
class Infolist:
    groups: tuple
    grid_columns: int = 2
    split_from: str = 'lg'

    def entries(self):
        return [entry for group in self.groups for entry in group]

    def to_dict(self, record):
        return {
            'section': {
                'split_from': self.split_from,
                'grid_columns': self.grid_columns,
                'groups': [[entry.to_dict(record) for entry in group] for group in self.groups],
            }
        }


@dataclass(frozen=True)
class Page:
    name: str
    route: str

    @property
    def url_name(self):
        return f"catalog:product-{self.name}"

    @property
    def pattern(self):
        """Django path pattern for the route, relative to the resource prefix"""
        pattern = self.route.strip('/').replace('{record}', '<int:record>')
        return f"{pattern}/" if pattern else ''


class ProductResource:
    """Admin resource bundle for :class:`~apps.catalog.models.Product`"""

    model = Product
    slug = 'products'
    record_title_attribute = 'name'
    global_search_results_limit = 3
    navigation_sort = 2
    navigation_icon = 'heroicon-o-shopping-cart'
    statuses = STATUSES

    @classmethod
    def form(cls):
        return Wizard(
            steps=(
                Step('Main data', (
                    FormField(
                        'name', 'text_input',
                        required=True,
                        unique=True,
                        live_on_blur=True,
                        fills=('slug',),
                        after_state_updated=lambda state: {'slug': slugify(state or '')},
                    ),
                    FormField('slug', 'text_input', required=True, hidden_on=(EDIT,), disabled_on=(EDIT,)),
                    FormField('price', 'text_input', required=True),
                )),
                Step('Additional data', (
                    FormField('status', 'radio', options=cls.statuses),
                    FormField('category_id', 'select', relationship=('category', 'name')),
                )),
            ),
            columns=1,
        )

    @classmethod
    def table(cls):
        return Table(
            columns=(
                Column('name', 'text_input', label='Product name', rules=('required', 'min:3'),
                       sortable=True, searchable=True),
                Column('price', sortable=True, money='usd', state=price_state),
                Column('is_active', 'toggle', on_color='success', off_color='danger'),
                Column('status', 'select', options=cls.statuses),
                Column('category.name'),
                Column('tags.name', badge=True),
                Column('created_at', since=True),
            ),
            default_sort=('price', 'desc'),
            filters=(
                Filter('status', 'select', field='status', options=cls.statuses),
                Filter('category', 'select', field='category', relationship=('category', 'name')),
                Filter('created_from', 'date', field='created_at', lookup='date__gte'),
                Filter('created_until', 'date', field='created_at', lookup='date__lte'),
            ),
            filters_layout='above_content',
            filters_form_columns=4,
            actions=('view', 'edit', 'delete'),
            bulk_actions=(('delete',),),
            empty_state_actions=('create',),
        )

    @classmethod
    def infolist(cls):
        return Infolist(
            groups=(
                (
                    Entry('name'),
                    Entry('price', money='usd', state=price_state),
                    Entry('created_at', badge=True, date=True, color='success'),
                ),
                (
                    Entry('status'),
                    Entry('category.name'),
                    # Resolves to the status map, not the product's tags
                    Entry('tags', badge=True, state=lambda record: cls.statuses),
                ),
            ),
            grid_columns=2,
            split_from='lg',
        )

    @classmethod
    def get_pages(cls):
        return {
            'index': Page('index', '/'),
            'create': Page('create', '/create'),
            'edit': Page('edit', '/{record}/edit'),
            'view': Page('view', '/{record}'),
        }

    @classmethod
    def get_relations(cls):
        return ['tags']

    @classmethod
    def get_navigation_label(cls):
        return 'Products'

    @classmethod
    def get_url(cls, page, record=None):
        page = cls.get_pages()[page]
        kwargs = {'record': getattr(record, 'pk', record)} if '{record}' in page.route else None
        return reverse(page.url_name, kwargs=kwargs)

    @classmethod
    def get_global_search_result_url(cls, record):
        return cls.get_url('view', record)

    @classmethod
    def get_record_title(cls, record):
        return getattr(record, cls.record_title_attribute)

    @classmethod
    def navigation(cls):
        return {
            'label': cls.get_navigation_label(),
            'icon': cls.navigation_icon,
            'sort': cls.navigation_sort,
        }
