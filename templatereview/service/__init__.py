"""
TemplateReview - Service Module
FastAPI app exposing the core operations over HTTP
"""
