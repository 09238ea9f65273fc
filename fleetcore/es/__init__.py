"""Elasticsearch response models, prepared requests and fleet endpoint request builders."""