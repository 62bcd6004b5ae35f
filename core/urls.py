from django.urls import path

from . import views

urlpatterns = [
    path('', views.page, {'title': 'dashboard'}, name='home'),

    # Users
    path('users/', views.page, {'title': 'users'}, name='users_list'),
    path('users/<int:user_id>/', views.page, {'title': 'user'}, name='user_details'),

    # Organization
    path('departments/', views.page, {'title': 'departments'}, name='departments_list'),
    path('companies/', views.page, {'title': 'companies'}, name='companies_list'),
    path('locations/', views.page, {'title': 'locations'}, name='locations_list'),

    # Procurement
    path('requisitions/', views.page, {'title': 'requisitions'}, name='requisitions_list'),
    path('invoices/', views.page, {'title': 'invoices'}, name='invoices_list'),
    path('vendors/', views.page, {'title': 'vendors'}, name='vendors_list'),

    path('inbox/', views.page, {'title': 'inbox'}, name='inbox'),
]
