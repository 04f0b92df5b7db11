"""
Orders URL routes.
"""

from django.urls import path

from . import views

app_name = "orders"

urlpatterns = [
    path("", views.order_list, name="list"),
    path("<str:order_id>/cancel/", views.cancel_order, name="cancel"),
    path("<str:order_id>/pay/", views.pay_order, name="pay"),
]
