"""
Application Layer - Services and workflows.

Services orchestrate domain entities through the repository interfaces;
use cases combine several services into one workflow.
"""
