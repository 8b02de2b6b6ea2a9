"""Shared translation value types and the models that detect the domain and the style of a text."""