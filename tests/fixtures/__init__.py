"""
Test fixtures for the Prototype Object System

Shared prototypes and model helpers used across the test suite.
"""

from prototype_objects import ObjectModel, ModelConfig


def memory_model(name: str = 'test', **env) -> ObjectModel:
    """Model with in-memory logs, independent of the process environment"""
    environ = {'PROTOTYPE_LOG_LEVEL': 'DEBUG'}
    environ.update(env)
    return ObjectModel(name=name, config=ModelConfig(environ=environ))


def say_hi(self):
    return f"Hi, I'm {self.first_name()}"


def build_person(model: ObjectModel):
    """The canonical root prototype"""
    return model.create({
        'first_name': 'Generic',
        'last_name': 'Person',
        'say_hi': say_hi,
    })
