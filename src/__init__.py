"""
Catalogue vidéo - Service d'administration du catalogue.

Ce package fournit le noyau du domaine : entités (Category), objets valeur
comparés structurellement, et contrat de persistance générique.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur, égalité structurelle)
- infrastructure/ : Couche infrastructure (repositories)
"""
