# editorcore

The engine-independent logic of a small game-engine editor, in plain Python
with no third-party dependencies.

## What is in it

- **`editorcore.names`**: `NamePool` deduplicates strings by a 32-bit djb2
  hash (`hash_string`, `hash_name` with `NameCase`). `Name` compares without
  regard to case but keeps the spelling it was created with; strings of 256
  characters or more give a None name, whose `str()` is `"None"`.
  `get_name_pool()` returns the shared pool used when none is given.
- **`editorcore.objects`**: `UObject` (UUID, name, `is_a`, `begin_destroy`)
  and `ObjectRegistry`, which constructs objects with fresh UUIDs, looks them
  up (`get`, `remove`) and iterates over them by class (`iter_objects`).
- **`editorcore.components`**: `ActorComponent`, `SceneComponent`
  (attachment with `setup_attachment`, recursive `pick`, `world_transform`),
  `PrimitiveComponent` (`PrimitiveType`, custom or vertex colour),
  `BillboardComponent` (sprite-sheet cell and `uv_offset`) and
  `AnimatedBillboardComponent`, which advances through the sheet at
  `play_rate` frames per second on `tick`.
- **`editorcore.world`**: `Actor` owns components; `World` spawns actors with
  unique names (`Actor`, `Actor_0`, `Actor_1`, ...), ticks them, queues
  destroyed actors and drops them from the registry at `late_tick`,
  `clear_world` keeps gizmo actors, and `world_info` / `load_world_info`
  take and restore a `WorldInfo` snapshot of `ObjectInfo` records.
- **`editorcore.actor_tree`**: `ActorTreeNode`, the outliner tree, with
  selection helpers that work on sets of UUIDs (`close_and_unselect_children`,
  `set_all_in_open_nodes`, `next_in_visible_order`, `select_range`).
- **`editorcore.editor`**: the `EditorWindow`, `Switchable` and `Command`
  interfaces and `EditorDesigner`, which keeps windows by id and forwards
  `render`, `on_resize` and `toggle` to them.
- **`editorcore.layout`**: `Rect`, `Window`, and `Splitter` with
  `HorizontalSplitter` / `VerticalSplitter`, which divide a rectangle between
  two children by a clamped ratio with padding between them.
- **`editorcore.debug_log`**: `DebugLog`, `process_command` and
  `resize_to_screen`.
- **`editorcore.console`**: `ConsoleWindow`, with a log, command history
  (`history_step` with `HistoryDirection`), tab completion (`complete`) and
  the commands `help` / `?`, `history`, `clear`, `stat memory`, `stat fps`,
  `stat none` and `spawn <cube|sphere|triangle> [count]`. Command names match
  without regard to case. `render()` returns the filtered log as
  `ConsoleLine` values, highlighting `[error]` lines and entered commands.

## Installing

```
pip install .
```

## Examples

```python
from editorcore.names import Name, NamePool

pool = NamePool()
a = Name("PlayerStart", pool)
b = Name("playerstart", pool)
assert a == b                   # comparison ignores case
assert str(a) == "PlayerStart"  # the original spelling is kept
```

```python
from editorcore.world import Actor, World

world = World()
first = world.spawn_actor(Actor)
second = world.spawn_actor(Actor)
assert (first.name, second.name) == ("Actor", "Actor_0")
world.destroy_actor(first)
world.late_tick(0.016)          # first leaves the registry here
```

```python
from editorcore.layout import HorizontalSplitter, Rect, Window

split = HorizontalSplitter()
left, right = Window(), Window()
split.set_children(left, right)
split.rect = Rect(0, 0, 800, 600)
split.update_child_rects()      # left and right now share the width
```

```python
from editorcore.console import ConsoleWindow, HistoryDirection

console = ConsoleWindow()
console.submit("help")
assert console.history_step(HistoryDirection.UP) == "help"
```

## What it does not do

- It draws nothing: there is no renderer, window system or GUI. Viewports
  and textures are plain objects you pass in, and `ConsoleWindow.render`
  only returns the lines to show.
- It does not read or write scene files. `World.world_info` returns a
  `WorldInfo` value and `World.load_world_info` takes one; storing it is up
  to you.
- The console's `spawn` command only writes log lines; it creates no actors.
- There is no command-line program.

## Running the tests

```
pip install .[test]
pytest
```