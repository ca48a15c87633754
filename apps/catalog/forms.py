from django import forms
from django.core.exceptions import ValidationError
from django.db import models

from .models import Banner, Category, Partnership, Product


def _https_urls(field, **kwargs):
    if isinstance(field, models.URLField):
        kwargs.setdefault("assume_scheme", "https")
    return field.formfield(**kwargs)


class _CatalogForm(forms.ModelForm):
    """Shared cleaning: names are required after stripping; sort_order is optional."""

    class Meta:
        formfield_callback = _https_urls

    def clean_name(self):
        name = (self.cleaned_data.get("name") or "").strip()
        if not name:
            raise ValidationError("Informe o nome.")
        return name

    def clean_sort_order(self):
        value = self.cleaned_data.get("sort_order")
        if value is None:
            return self.instance.sort_order or 0
        return value


class CategoryForm(_CatalogForm):
    sort_order = forms.IntegerField(required=False)

    class Meta(_CatalogForm.Meta):
        model = Category
        fields = ["name", "published", "sort_order"]


class ProductForm(_CatalogForm):
    publish_now = forms.BooleanField(required=False)

    class Meta(_CatalogForm.Meta):
        model = Product
        fields = ["category", "name", "description", "price", "image_url", "stock", "active", "featured"]

    def __init__(self, *args, tenant=None, **kwargs):
        super().__init__(*args, **kwargs)
        # only categories of the same store are selectable
        self.fields["category"].queryset = Category.objects.filter(tenant=tenant)
        self.fields["category"].required = False

    def save(self, commit=True):
        product = super().save(commit=False)
        product.set_published(self.cleaned_data.get("publish_now", False))
        if commit:
            product.save()
        return product


class BannerForm(_CatalogForm):
    sort_order = forms.IntegerField(required=False)

    class Meta(_CatalogForm.Meta):
        model = Banner
        fields = ["title", "image_url", "link", "published", "sort_order"]

    def clean_title(self):
        title = (self.cleaned_data.get("title") or "").strip()
        if not title:
            raise ValidationError("Informe o título.")
        return title


class PartnershipForm(_CatalogForm):
    sort_order = forms.IntegerField(required=False)

    class Meta(_CatalogForm.Meta):
        model = Partnership
        fields = ["name", "logo_url", "external_link", "published", "sort_order"]
