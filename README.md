# akecs

A small entity-component-system (ECS) library with no dependencies outside
the standard library.

- **Entities** (`akecs.types.Entity`) are handles made of an `index` and a
  `version`. Two handles are equal when both match. Handles returned by
  `ECS.create_entity` share their signature and component indices with the
  stored entity. When an entity is destroyed its slot is reused with a higher
  version, so `ECS.is_entity_valid` returns `False` for the old handle.
- **Signatures** (`akecs.types.Signature`) are 32-bit sets with `test`,
  `set`, `reset` and `issubset`. Each registered component type is given the
  next free bit; at most 32 component types can be registered.
- **Components** subclass `akecs.component_array.Component` and must be
  constructible without arguments. Their instances live in pooled storage
  (`ComponentArray`) that grows in rows of 1000 and reuses freed slots. Each
  stored component carries `eid`, `bit_position` and `component_index`. When
  a component is removed its `reset()` is called; the default clears the
  instance attributes and runs `__init__` again.
- **Systems** subclass `akecs.system.System` and are given a `Signature`.
  Whenever an entity's components change, every system whose signature is a
  subset of the entity's signature keeps the entity in its `entities` set and
  has `on_add_entity` called; other systems drop it and have
  `after_destroy_entity` called. Before an entity is destroyed, each system
  holding it has `on_destroy_entity` called.

## Installation

```
pip install akecs
```

## Usage

```python
from akecs.ecs import ECS
from akecs.component_array import Component
from akecs.system import System
from akecs.types import Signature


class Position(Component):
    def __init__(self):
        self.x = 0.0
        self.y = 0.0


class Velocity(Component):
    def __init__(self):
        self.dx = 0.0
        self.dy = 0.0


class Movement(System):
    def __init__(self, ecs):
        super().__init__()
        self.ecs = ecs

    def update(self, dt):
        for entity in self.entities:
            pos = self.ecs.get_component(entity, Position)
            vel = self.ecs.get_component(entity, Velocity)
            pos.x += vel.dx * dt
            pos.y += vel.dy * dt


ecs = ECS()
ecs.register_component(Position)
ecs.register_component(Velocity)

movement = ecs.register_system(Movement, ecs)
signature = Signature()
signature.set(ecs.bit_position(Position), True)
signature.set(ecs.bit_position(Velocity), True)
ecs.set_system_signature(Movement, signature)

player = ecs.create_entity()
ecs.add_component(player, Position)
ecs.add_component(player, Velocity).dx = 2.0

movement.update(0.5)
print(ecs.get_component(player, Position).x)  # 1.0

ecs.destroy_entity(player)
print(ecs.is_entity_valid(player))  # False
```

Other calls on `ECS`: `remove_component`, `entity_signature` (a copy of the
entity's signature), `is_component_attached`, and `get_component_at`, which
looks a component up by slot index and by the order in which its type was
registered. The lower-level `ComponentManager` and `SystemManager` are
available as `ecs.component_manager` and `ecs.system_manager`.

## Errors

Misuse raises `akecs.types.ECSError`: attaching the same component twice,
getting or removing a component that is not attached, registering a
component type or system type twice, using an unregistered component type,
setting a system's signature twice or before registering the system, and
passing a destroyed or unknown entity to `destroy_entity`, `add_component`,
`get_component` or `entity_signature`. A signature bit position outside
0–31 raises `IndexError`.

## What it does not do

This is a library only. It has no command-line tool, no scene, rendering,
scripting or editor layer, and no saving or loading of entities; systems are
plain objects and the package does not schedule or run them.

## Running the tests

```
pip install -e ".[test]"
pytest
```