import django_filters

from modules.customers.models import Customer


class CustomerFilter(django_filters.FilterSet):
    name = django_filters.CharFilter(field_name="first_name", lookup_expr="icontains")
    last_name = django_filters.CharFilter(field_name="last_name", lookup_expr="icontains")
    email = django_filters.CharFilter(field_name="email", lookup_expr="iexact")
    cpf = django_filters.CharFilter(field_name="cpf", lookup_expr="exact")

    class Meta:
        model = Customer
        fields = ["name", "last_name", "email", "cpf"]
