"""
Laminotes Use Cases

Application services driving the core through a UnitOfWork.
"""
