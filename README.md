# wiiorganizer

A small tool for keeping a WBFS folder of Wii games in order. It lists the
games already in that folder, reads a new game's ID from its disc image, and
downloads cover art for the collection into a cache directory.

## Installation

```
pip install .
```

The window uses Tkinter, which ships with most Python installations; on
some Linux distributions it is a separate system package.

To run the tests, install the test extra as well:

```
pip install ".[test]"
pytest
```

## Running

```
wii-organizer
```

or, to keep covers and preferences somewhere other than the user's cache
directory:

```
wii-organizer --cache-dir PATH
```

This opens the main window. From there you can:

- **Open WBFS Folder...**: choose the folder that holds your games. If the
  folder you pick is not called `wbfs`, a `wbfs` folder is created inside it
  and that one is used. The choice is remembered for next time.
- **Download covers**: fetch the US disc cover archive, save it as
  `discs.zip` in the cache directory and unpack it there. This runs in the
  background; failures are logged.
- **Add WBFS game...**: choose a single `.wbfs` file. Its game ID is read
  from the disc header and the game is added to the list under the file's
  name. Files with another extension are refused with a logged warning.
- **Search**: narrow the list as you type; a game matches when its name or
  ID contains the search text, ignoring case.

Each game is listed as `Name  [ID]`.

## How games are found

Each game in the WBFS folder is a directory named like this:

```
Super Mario Galaxy [RMGE01]
```

The text before the brackets is the game's name and the text inside them is
its ID. Directories that do not follow this pattern are ignored. Covers are
looked up by ID as `wii/disc/US/<ID>.png` in the cache directory.

Single images are read by `wiiorganizer.disc.read_game_id`, which accepts
WBFS files and plain Wii or GameCube disc images and raises `DiscError` for
anything else.

## Preferences

The chosen WBFS folder is stored as JSON in `prefs.json` in the cache
directory (`wiiorganizer.prefs.CachedData`). It is saved each time the
folder is rescanned after a change.

## Using it as a library

- `wiiorganizer.covers.WiiResources` downloads cover archives
  (`download`, `download_url`), tracks running downloads in `downloads` as
  `InProgress` entries, and returns cached cover bytes with `get_cover`
  (or `None` when there is no cover).
- `wiiorganizer.appdata.AppData` holds the game list and WBFS folder and
  handles `WbfsDirChange` and `AddWbfs` messages; `run_updates` handles
  messages from a queue until it receives `None`.
- `wiiorganizer.game.parse_game_dir_name` splits `"Title [ID]"` folder
  names.
- `wiiorganizer.reactive.Dynamic` is the observable value used throughout.

## What it does not do

- The window shows names and IDs only; cover images are not drawn, and
  download progress is not displayed.
- Game names cannot be edited, and there are no game descriptions.
- Only the fixed US disc cover archive is downloaded.