"""
Couche infrastructure du catalogue.

Ce module contient les implementations concretes des interfaces definies
dans la couche domaine (ports) :

- persistence/ : Stockage des entites (en memoire pour l'instant)

Architecture hexagonale : les adapters ici implementent les ports du domaine,
permettant de changer l'implementation (ex: base de donnees durable au lieu
du stockage en memoire) sans modifier la logique metier.
"""
