# pocketpet

A small virtual pet that lives on a simulated clock. It gets hungry and
thirsty, needs washing and play, sleeps at night and can fall ill. Each
second a behaviour tree picks what it does, and its personality drifts with
how it is treated. The package also has a tone synthesiser for the pet's
sound cues and a 128×64 one-bit canvas that the pet is drawn on.

It is a library with no dependencies beyond the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running a pet

`pocketpet.simulation.Simulation` holds the pet (`sim.pet`), its brain
(`sim.brain`), learned habits (`sim.habits`) and behaviour mode (`sim.ai`).
Call `tick()` once per simulated second. The constructor starts a fresh egg.
`reset()` starts over at any time.

Time comes from a clock object. The default `Clock` counts real
milliseconds. `ManualClock` from `pocketpet.config` only moves when you call
`advance(ms)`:

```python
from pocketpet.config import ManualClock
from pocketpet.simulation import Simulation

clock = ManualClock()
sim = Simulation(clock=clock)

for _ in range(700):          # the egg hatches after 600 seconds
    clock.advance(1000)
    sim.tick()

sim.feed()
sim.stroke()
print(sim.pet.stage, sim.pet.emotion, sim.ai.mode)
```

The care actions are `feed()`, `drink()`, `play()`, `wash()`, `stroke()`,
`medicine()` and `toggle_sleep()`:

- `feed()`, `drink()`, `play()`, `wash()` and `stroke()` return `False` and
  do nothing while the pet is asleep, waking up or heavily sick. You can
  check this with the `busy` property.
- `play()` also returns `False` when the pet is too tired. In that case it
  sounds angry.
- `medicine()` works in any state.
- `toggle_sleep()` wakes a sleeping pet, or sends an awake one to bed unless
  it is heavily sick.

Pass `on_sound=callback` to the constructor to be told of every
`SoundEvent` the pet makes.

A virtual day lasts 24 real minutes. `hour_of_day(now_ms)` and
`is_night(now_ms)` in `pocketpet.config` tell where in that day a time falls.
Night runs from hour 20 to hour 6. A tired pet falls asleep at night.

The parts can also be used on their own:

- `pocketpet.behavior.BehaviorTree` picks the mode.
- `pocketpet.personality` has `scores`, `recompute` and `PersonalityTicker`,
  which drive the personality changes.
- `pocketpet.habits` has `Habits`, `refuse_action` and `RequestThrottle`,
  which track when the owner usually cares for the pet.
- `derive_emotion(pet)` in `pocketpet.simulation` maps stats to an emotion.

## Saving and loading

`pocketpet.storage` writes the whole state (pet, brain, habits and AI mode)
to a JSON file and reads it back:

```python
from pocketpet import storage

storage.save(sim, "pet.json")
storage.load(sim, "pet.json")   # False if there is no such file yet
```

`to_dict(sim)` and `apply_dict(sim, data)` do the same with plain
dictionaries. If the data is malformed, you get a `ValueError` and the
simulation is left as it was.

## Drawing

`pocketpet.anim.Canvas` is a 128×64 one-bit pixel buffer with these
primitives:

- `pixel`, `get_pixel`
- `fill_rect`, `draw_rect`
- `draw_line`
- `fill_circle`
- `draw_bitmap`

`print_text` does not draw any glyphs. It only records the text and its
position in `canvas.texts`.

`Animator(root)` renders a new frame into its canvas whenever
`tick(pet, now_ms)` is called at least 80 ms after the last one:

- It plays frames from `<root>/anim/<STAGE>/<EMOTION>/fNNN.bin`. Each file
  is a 1024-byte bitmap. If the exact path is missing, it tries the
  lower-case path.
- Frames from files get status bars laid over them by `draw_status_overlay`.
- When a frame is missing, or when no root is given, it draws the pet itself
  with `draw_procedural`.
- `frame_counts()` reports how many files each animation folder holds.

## Sound

`pocketpet.sound.Synth` turns sound events into short sine, square or
sawtooth tones, each with an attack and release envelope. `render(now_ms)`
returns the next block of 256 frames as interleaved 16-bit little-endian
stereo samples at 22050 Hz. It returns `b""` once the tone has ended.

## What it does not do

The package computes state, pixels and samples. It does not put them
anywhere:

- There is no window or display output. Read the canvas yourself.
- There is no audio playback. Send the rendered bytes to a device yourself.
- There is no input handling, command-line program, network interface or
  main loop. Your own code calls `tick()`, the care actions and
  `Animator.tick()` at the right times.