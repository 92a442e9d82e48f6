"""Sapling protocol components: sent output records."""