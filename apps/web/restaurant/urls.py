"""
Restaurant URL routes.
"""

from django.urls import path

from . import views

app_name = "restaurant"

urlpatterns = [
    path("", views.restaurant_list, name="list"),
    path("add/", views.add_restaurant, name="add"),
    path("<str:restaurant_id>/items/add/", views.add_menu_item, name="add_item"),
]
