"""Command line interface for magento-deploy"""
