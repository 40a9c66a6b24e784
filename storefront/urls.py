"""
URL configuration for storefront project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/stable/topics/http/urls/
"""
from django.contrib import admin
from django.urls import path

urlpatterns = [
    # Admin is the authoring surface for catalog content
    path('admin/', admin.site.urls),
]
