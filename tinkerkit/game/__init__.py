"""Turn-based battle game: units, spells, random rolls and binary data stores."""